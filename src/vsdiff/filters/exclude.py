"""Exclude matching for change records.

A pattern without ``/`` is a bare name and matches any path segment equal to
it (``node_modules`` drops ``web/node_modules/x.js``). A pattern with ``/``
matches that exact path or anything beneath it.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from vsdiff.filters.paths import normalize_path
from vsdiff.git.models import ChangeRecord


def is_excluded(path: str, patterns: Sequence[str]) -> bool:
    """Return True if *path* matches any of the normalised *patterns*."""
    if not path:
        return False
    normalized = normalize_path(path)
    if not normalized:
        return False
    segments = normalized.split("/")
    for pattern in patterns:
        if not pattern:
            continue
        if "/" in pattern:
            if normalized == pattern or normalized.startswith(f"{pattern}/"):
                return True
        elif pattern in segments:
            return True
    return False


def is_record_excluded(record: ChangeRecord, patterns: Sequence[str]) -> bool:
    return is_excluded(record.old_path, patterns) or is_excluded(record.new_path, patterns)


def partition_records(
    records: Sequence[ChangeRecord], patterns: Sequence[str]
) -> Tuple[List[ChangeRecord], List[ChangeRecord]]:
    """Split *records* into (kept, excluded), both in input order."""
    kept: List[ChangeRecord] = []
    excluded: List[ChangeRecord] = []
    for record in records:
        (excluded if is_record_excluded(record, patterns) else kept).append(record)
    return kept, excluded


def filter_records(records: Sequence[ChangeRecord], patterns: Sequence[str]) -> List[ChangeRecord]:
    """Stable filter dropping excluded records."""
    if not patterns:
        return list(records)
    return partition_records(records, patterns)[0]
