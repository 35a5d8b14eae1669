"""Passthrough argument handling for ``git diff``."""

from __future__ import annotations

from typing import List, Sequence, Tuple

_STAGED_FLAGS = ("--staged", "--cached")


def split_args(args: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split *args* at the first ``--`` into (pre-args, pathspecs)."""
    args = list(args)
    if "--" not in args:
        return args, []
    sep = args.index("--")
    return args[:sep], args[sep + 1:]


def is_staged_flag(arg: str) -> bool:
    return arg in _STAGED_FLAGS or arg.startswith(tuple(f"{flag}=" for flag in _STAGED_FLAGS))


def apply_staged_flag(args: Sequence[str], staged: bool) -> List[str]:
    """Prepend ``--staged`` unless it (or ``--cached``) is already present."""
    if not staged or any(is_staged_flag(arg) for arg in args):
        return list(args)
    return ["--staged", *args]


def names_revision(args: Sequence[str]) -> bool:
    """True when any argument is not an option (a commit, range, or similar)."""
    return any(not arg.startswith("-") for arg in args)
