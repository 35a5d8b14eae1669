"""Git interface layer: adapter, raw diff parsing, models."""

from vsdiff.git.adapter import (
    GitError,
    ObjectNotFound,
    cat_file,
    get_raw_diff,
    get_repo_root,
    raw_diff_args,
)
from vsdiff.git.args import apply_staged_flag, is_staged_flag, split_args
from vsdiff.git.models import NULL_SHA, ChangeRecord, ChangeStatus, is_absent
from vsdiff.git.raw_parser import RawDiffParser, parse_raw_diff

__all__ = [
    "NULL_SHA",
    "ChangeRecord",
    "ChangeStatus",
    "GitError",
    "ObjectNotFound",
    "RawDiffParser",
    "apply_staged_flag",
    "cat_file",
    "get_raw_diff",
    "get_repo_root",
    "is_absent",
    "is_staged_flag",
    "parse_raw_diff",
    "raw_diff_args",
    "split_args",
]
