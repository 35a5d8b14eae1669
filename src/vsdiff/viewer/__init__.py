"""External diff viewer integration."""

from vsdiff.viewer.launcher import ViewerError, launch_viewer, viewer_command

__all__ = ["ViewerError", "launch_viewer", "viewer_command"]
