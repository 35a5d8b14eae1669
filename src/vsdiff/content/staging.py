"""Temporary files handed to the diff viewer."""

from __future__ import annotations

import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vsdiff.content.resolver import ContentResolver, Side
from vsdiff.git.models import ChangeRecord

_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_name(value: str) -> str:
    """Flatten *value* into a single safe file name."""
    return _UNSAFE_RE.sub("_", value)


@dataclass(frozen=True)
class StagedPair:
    """The two locations a viewer opens for one record."""

    index: int
    record: ChangeRecord
    left: Path
    right: Path
    right_is_live: bool = False  # right is the working-tree file itself


class StagingArea:
    """A ``vsd-`` temp directory holding left (and fallback right) files."""

    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = Path(root) if root else Path(tempfile.mkdtemp(prefix="vsd-"))

    def write(self, name: str, content: bytes) -> Path:
        path = self.root / sanitize_name(name)
        path.write_bytes(content)
        return path

    def stage_record(self, index: int, record: ChangeRecord, resolver: ContentResolver) -> StagedPair:
        left_content = resolver.resolve_side(record, Side.OLD)
        left = self.write(
            f"left-{index}-{sanitize_name(record.old_path or record.new_path)}", left_content
        )

        path = record.new_path or record.old_path
        live = resolver.working_copy_path(path)
        if live is not None:
            return StagedPair(index=index, record=record, left=left, right=live, right_is_live=True)

        right_content = resolver.resolve_content(record.new_sha, path)
        right = self.write(f"right-{index}-{sanitize_name(path)}", right_content)
        return StagedPair(index=index, record=record, left=left, right=right)

    def cleanup(self) -> None:
        shutil.rmtree(self.root, ignore_errors=True)
