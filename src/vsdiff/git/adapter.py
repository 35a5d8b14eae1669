"""Git subprocess wrapper: repo root, raw diff, object lookup."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""

    def __init__(self, message: str, exit_code: int = 2) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ObjectNotFound(GitError):
    """Raised when the object store has no object for a sha."""


def _run_git(
    args: Sequence[str], cwd: Path, timeout: Optional[float] = 30
) -> subprocess.CompletedProcess:
    """Run a git command, returning the completed process with byte output."""
    logger.debug("git %s", " ".join(args))
    try:
        return subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")


def get_repo_root(cwd: Optional[Path] = None, timeout: Optional[float] = 30) -> Path:
    """Return the root of the current git repository, or *cwd* outside one."""
    cwd = cwd or Path.cwd()
    result = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd, timeout=timeout)
    if result.returncode == 0:
        return Path(result.stdout.decode("utf-8", errors="surrogateescape").strip())
    return cwd


def raw_diff_args(pre_args: Sequence[str], pathspecs: Sequence[str] = ()) -> List[str]:
    """Build the ``git diff`` arguments for a raw, NUL-delimited listing."""
    args = [*pre_args, "--raw", "-z"]
    if pathspecs:
        args += ["--", *pathspecs]
    return args


def get_raw_diff(
    cwd: Path,
    pre_args: Sequence[str],
    pathspecs: Sequence[str] = (),
    timeout: Optional[float] = 30,
) -> bytes:
    """Return ``git diff --raw -z`` output.

    Exit status 1 only means "differences found"; anything above is an error.
    """
    result = _run_git(["diff", *raw_diff_args(pre_args, pathspecs)], cwd=cwd, timeout=timeout)
    if result.returncode > 1:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise GitError(stderr or "git diff failed.", exit_code=result.returncode)
    return result.stdout


def cat_file(repo_root: Path, sha: str, timeout: Optional[float] = 30) -> bytes:
    """Return the stored bytes for *sha*. Raises ObjectNotFound if git has none."""
    result = _run_git(["cat-file", "-p", sha], cwd=repo_root, timeout=timeout)
    if result.returncode != 0:
        raise ObjectNotFound(f"object not found: {sha}", exit_code=result.returncode)
    return result.stdout
