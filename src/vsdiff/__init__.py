"""vsdiff: open git changes side by side in a visual diff viewer."""

__version__ = "0.3.0"
