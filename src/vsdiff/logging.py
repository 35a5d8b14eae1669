"""Logging setup: stdlib logging rendered by Rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def configure_logging(*, verbose: bool = False, debug: bool = False) -> None:
    """WARNING by default, INFO with --verbose, DEBUG with --debug."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    root = logging.getLogger("vsdiff")
    root.handlers.clear()
    root.addHandler(
        RichHandler(console=console, show_path=debug, show_time=debug, markup=False)
    )
    root.setLevel(level)
    root.propagate = False
