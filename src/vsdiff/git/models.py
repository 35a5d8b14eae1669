"""Data models for raw diff records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NULL_SHA = "0" * 40


class ChangeStatus(str, Enum):
    ADDED = "A"
    COPIED = "C"
    DELETED = "D"
    MODIFIED = "M"
    RENAMED = "R"
    TYPE_CHANGED = "T"
    UNMERGED = "U"
    UNKNOWN = "X"

    @classmethod
    def label(cls, status: str) -> str:
        """Human-readable name for a status letter. Unknown letters pass through."""
        for member in cls:
            if member.value == status:
                return member.name.lower().replace("_", " ")
        return status or "?"


def is_absent(sha: str) -> bool:
    """True when *sha* does not address a stored object.

    git abbreviates raw output by default, so any all-zero id counts.
    """
    return not sha.strip("0")


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """A single changed path from ``git diff --raw -z``."""

    old_sha: str
    new_sha: str
    status: str  # first character of the raw status token
    old_path: str
    new_path: str

    @property
    def is_move(self) -> bool:
        return self.old_path != self.new_path

    @property
    def display_path(self) -> str:
        return self.new_path or self.old_path
