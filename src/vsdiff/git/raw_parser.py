"""Raw diff parser: turns ``git diff --raw -z`` output into ChangeRecords.

Fields are NUL separated. Each record starts with a metadata field::

    :100644 100644 <old sha> <new sha> <status>

Paths either follow inline after a tab (one or two, tab separated) or arrive
as the next NUL-delimited field(s). Rename and copy records carry two paths.
Malformed fragments are skipped, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from vsdiff.git.models import ChangeRecord

_TWO_PATH_STATUSES = ("R", "C")


@dataclass(frozen=True)
class InlinePaths:
    """Metadata field that carried its paths after a tab."""

    meta: str
    paths: Tuple[str, ...]


@dataclass(frozen=True)
class PendingPaths:
    """Metadata field whose first path is the next field in the stream."""

    meta: str
    paths: Tuple[str, ...] = ()


MetaToken = Union[InlinePaths, PendingPaths]


def tokenize(field: str) -> MetaToken:
    """Separate the metadata part of *field* from any inline paths."""
    if "\t" not in field:
        return PendingPaths(meta=field)
    meta, *inline = field.split("\t")
    return InlinePaths(meta=meta, paths=tuple(inline[:2]))


def _split_meta(meta: str) -> Tuple[str, str, str]:
    """Return ``(old_sha, new_sha, status_token)``; modes are dropped."""
    parts = meta[1:].split(" ")
    parts += [""] * (5 - len(parts))
    return parts[2], parts[3], parts[4]


def _decode(raw: Union[bytes, str]) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="surrogateescape")
    return raw


class RawDiffParser:
    """Parse NUL-delimited raw diff output into ordered ChangeRecords.

    Usage::

        records = RawDiffParser(stdout_bytes).parse()
    """

    def __init__(self, raw: Union[bytes, str]) -> None:
        self._fields = _decode(raw).split("\0")

    def parse(self) -> List[ChangeRecord]:
        records: List[ChangeRecord] = []
        idx = 0
        total = len(self._fields)

        while idx < total:
            field = self._fields[idx]
            idx += 1
            if not field.startswith(":"):
                continue

            token = tokenize(field)
            old_sha, new_sha, status = _split_meta(token.meta)
            slots = list(token.paths) + [""] * (2 - len(token.paths))

            # Path slots still to be filled from the stream, in order.
            pending: List[int] = []
            if isinstance(token, PendingPaths):
                pending.append(0)
            if status.startswith(_TWO_PATH_STATUSES) and not slots[1]:
                pending.append(1)

            for slot in pending:
                slots[slot] = self._fields[idx] if idx < total else ""
                idx += 1

            old_path, new_path = slots
            if not old_path and not new_path:
                continue
            records.append(
                ChangeRecord(
                    old_sha=old_sha,
                    new_sha=new_sha,
                    status=status[:1],
                    old_path=old_path,
                    new_path=new_path or old_path,
                )
            )

        return records


def parse_raw_diff(raw: Union[bytes, str]) -> List[ChangeRecord]:
    """Convenience wrapper around :class:`RawDiffParser`."""
    return RawDiffParser(raw).parse()
