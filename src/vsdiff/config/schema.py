"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

DEFAULT_VIEWER = ["code", "--diff"]


@dataclass
class DiffConfig:
    staged: bool = False
    exclude: List[str] = field(default_factory=list)  # merged with --exclude


@dataclass
class ViewerConfig:
    command: List[str] = field(default_factory=lambda: list(DEFAULT_VIEWER))
    wait: bool = False  # pass --wait so each pair is closed before the next opens


@dataclass
class GitConfig:
    timeout: int = 30  # seconds, per git invocation


@dataclass
class VsdConfig:
    diff: DiffConfig = field(default_factory=DiffConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)
    git: GitConfig = field(default_factory=GitConfig)
