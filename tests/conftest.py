"""Shared test fixtures: raw diff samples, temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

OLD_SHA = "1" * 40
NEW_SHA = "2" * 40
ZERO_SHA = "0" * 40


def meta(status: str, old_sha: str = OLD_SHA, new_sha: str = NEW_SHA) -> str:
    return f":100644 100644 {old_sha} {new_sha} {status}"


@pytest.fixture
def raw_modified() -> bytes:
    """A single modified file, paths as trailing NUL fields."""
    return f"{meta('M')}\0src/app.py\0".encode()


@pytest.fixture
def raw_rename() -> bytes:
    """A rename with similarity suffix."""
    return f"{meta('R087')}\0old/name.py\0new/name.py\0".encode()


@pytest.fixture
def raw_mixed() -> bytes:
    """Added, modified, copied and deleted records in one stream."""
    return "".join(
        [
            f":000000 100644 {ZERO_SHA} {NEW_SHA} A\0docs/new.md\0",
            f"{meta('M')}\0node_modules/pkg/index.js\0",
            f"{meta('C100')}\0lib/a.py\0lib/b.py\0",
            f":100644 000000 {OLD_SHA} {ZERO_SHA} D\0gone.txt\0",
        ]
    ).encode()


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "core.autocrlf", "false")
    (tmp_path / "README.md").write_text("# Test\n")
    (tmp_path / "app.py").write_text("x = 1\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init")
    return tmp_path


@pytest.fixture
def git():
    """Run git in a repo: ``git(repo, "add", "file")``."""
    return _git
