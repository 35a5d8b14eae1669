"""Review pipeline: raw diff → records → excludes → staged viewer pairs.

Only a failing ``git diff`` raises (GitError). Everything downstream degrades:
unparseable fragments are dropped by the parser and unresolved content is
staged as an empty file, so the record count is preserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from vsdiff.content.resolver import ContentResolver
from vsdiff.content.staging import StagedPair, StagingArea
from vsdiff.filters.exclude import filter_records, partition_records
from vsdiff.git.adapter import GitError, get_raw_diff
from vsdiff.git.args import is_staged_flag, names_revision
from vsdiff.git.models import ChangeRecord
from vsdiff.git.raw_parser import parse_raw_diff

logger = logging.getLogger(__name__)


@dataclass
class ReviewSession:
    """Records for one ``git diff`` invocation."""

    parsed: List[ChangeRecord] = field(default_factory=list)
    entries: List[ChangeRecord] = field(default_factory=list)
    excluded: List[ChangeRecord] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.entries


def collect_changes(
    cwd: Path,
    pre_args: Sequence[str],
    pathspecs: Sequence[str],
    excludes: Sequence[str],
    *,
    timeout: Optional[float] = 30,
) -> ReviewSession:
    """Run ``git diff --raw -z`` and split its records by *excludes*."""
    raw = get_raw_diff(cwd, pre_args, pathspecs, timeout=timeout)
    parsed = parse_raw_diff(raw)
    entries, excluded = partition_records(parsed, excludes)
    logger.info("parsed %d records, %d excluded", len(parsed), len(excluded))
    return ReviewSession(parsed=parsed, entries=entries, excluded=excluded)


def staged_hint(
    cwd: Path,
    pre_args: Sequence[str],
    excludes: Sequence[str],
    *,
    timeout: Optional[float] = 30,
) -> List[ChangeRecord]:
    """Staged records worth pointing out when a plain ``git diff`` came back empty.

    Returns nothing when the user already asked for staged changes or named a
    revision, or when the probe itself fails.
    """
    if any(is_staged_flag(arg) for arg in pre_args) or names_revision(pre_args):
        return []
    try:
        raw = get_raw_diff(cwd, ["--staged"], timeout=timeout)
    except GitError as exc:
        logger.debug("staged probe failed: %s", exc)
        return []
    return filter_records(parse_raw_diff(raw), excludes)


def stage_entries(
    entries: Sequence[ChangeRecord],
    resolver: ContentResolver,
    staging: StagingArea,
) -> Iterator[StagedPair]:
    """Yield a StagedPair per record, in record order."""
    for idx, record in enumerate(entries):
        yield staging.stage_record(idx, record, resolver)
