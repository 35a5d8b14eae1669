"""Path normalisation shared by candidate paths and exclude patterns."""

from __future__ import annotations

from typing import Iterable, List

_EXCLUDE_MAGIC = ":(exclude)"


def normalize_path(value: str) -> str:
    """Canonical ``/``-separated, relative form of *value*. Idempotent."""
    normalized = value.replace("\\", "/")
    if normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.lstrip("/").rstrip("/")


def normalize_exclude(value: str) -> str:
    """Normalise a user-supplied exclude, dropping a ``:(exclude)`` pathspec prefix."""
    normalized = value.strip()
    if normalized.startswith(_EXCLUDE_MAGIC):
        normalized = normalized[len(_EXCLUDE_MAGIC):]
    return normalize_path(normalized)


def normalize_excludes(values: Iterable[str]) -> List[str]:
    return [pattern for pattern in map(normalize_exclude, values) if pattern]
