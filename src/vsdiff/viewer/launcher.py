"""Diff viewer launcher: ``code --diff left right`` and friends."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Sequence

logger = logging.getLogger(__name__)


class ViewerError(Exception):
    """Raised when the viewer executable cannot be started."""


def viewer_command(command: Sequence[str], left: Path, right: Path, *, wait: bool = False) -> List[str]:
    """Full argv for opening *left* and *right* side by side."""
    if not command:
        raise ViewerError("No viewer command configured")
    argv = list(command)
    if wait and "--wait" not in argv:
        argv.insert(1, "--wait")
    return [*argv, str(left), str(right)]


def launch_viewer(command: Sequence[str], left: Path, right: Path, *, wait: bool = False) -> int:
    """Run the viewer and return its exit status."""
    argv = viewer_command(command, left, right, wait=wait)
    logger.debug("launching %s", " ".join(argv))
    try:
        result = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError as exc:
        raise ViewerError(f"{argv[0]} is not installed or not on PATH") from exc
    return result.returncode
