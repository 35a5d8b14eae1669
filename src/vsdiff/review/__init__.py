"""Review pipeline: collect, filter, stage."""

from vsdiff.review.engine import ReviewSession, collect_changes, stage_entries, staged_hint

__all__ = ["ReviewSession", "collect_changes", "stage_entries", "staged_hint"]
