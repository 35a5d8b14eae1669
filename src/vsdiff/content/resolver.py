"""Content resolution: the two byte buffers behind each change record.

Resolution is an ordered chain of strategies. Each returns bytes or ``NEXT``;
the first to return bytes wins and the chain always ends with an empty
buffer, so resolution never raises.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from vsdiff.git.adapter import GitError, cat_file
from vsdiff.git.models import ChangeRecord, is_absent

logger = logging.getLogger(__name__)


class Signal(Enum):
    NEXT = "next"


NEXT = Signal.NEXT

StrategyResult = Union[bytes, Signal]
Strategy = Callable[[str, str], StrategyResult]
ObjectStore = Callable[[Path, str, Optional[float]], bytes]


class Side(str, Enum):
    OLD = "old"
    NEW = "new"


class ContentResolver:
    """Resolve record content from the object store or the working copy.

    *object_store* is called as ``object_store(repo_root, sha, timeout)`` and
    may raise GitError (including ObjectNotFound) for unusable shas.
    """

    def __init__(
        self,
        repo_root: Path,
        *,
        object_store: ObjectStore = cat_file,
        timeout: Optional[float] = 30,
    ) -> None:
        self.repo_root = Path(repo_root)
        self._object_store = object_store
        self._timeout = timeout
        self.strategies: List[Strategy] = [
            self._from_object_store,
            self._from_working_copy,
        ]

    # --- strategies ---

    def _from_object_store(self, sha: str, path: str) -> StrategyResult:
        if is_absent(sha):
            return NEXT
        try:
            return self._object_store(self.repo_root, sha, self._timeout)
        except GitError as exc:
            logger.debug("object store miss for %s (%s): %s", path, sha, exc)
            return NEXT

    def _from_working_copy(self, sha: str, path: str) -> StrategyResult:
        if not path:
            return NEXT
        try:
            return (self.repo_root / path).read_bytes()
        except OSError as exc:
            logger.debug("working copy unreadable for %s: %s", path, exc)
            return NEXT

    # --- public API ---

    def working_copy_path(self, path: str) -> Optional[Path]:
        """Absolute path of *path* in the working tree, if it is a file there."""
        if not path:
            return None
        candidate = self.repo_root / path
        return candidate if candidate.is_file() else None

    def resolve_content(self, sha: str, path: str) -> bytes:
        """Best available bytes for (*sha*, *path*); empty when nothing resolves."""
        for strategy in self.strategies:
            result = strategy(sha, path)
            if result is not NEXT:
                return result
        return b""

    def resolve_side(self, record: ChangeRecord, side: Side) -> bytes:
        """Content for one side of *record*.

        The new side prefers the live working-copy file. The old side goes
        through the object store first and is empty when the file did not
        exist before the change.
        """
        if side == Side.OLD:
            if is_absent(record.old_sha):
                return b""
            return self.resolve_content(record.old_sha, record.old_path or record.new_path)

        path = record.new_path or record.old_path
        if self.working_copy_path(path) is not None:
            result = self._from_working_copy(record.new_sha, path)
            if result is not NEXT:
                return result
        return self.resolve_content(record.new_sha, path)

    def resolve_pair(self, record: ChangeRecord) -> Tuple[bytes, bytes]:
        return self.resolve_side(record, Side.OLD), self.resolve_side(record, Side.NEW)
