"""Content resolution and viewer staging."""

from vsdiff.content.resolver import NEXT, ContentResolver, Side
from vsdiff.content.staging import StagedPair, StagingArea, sanitize_name

__all__ = [
    "NEXT",
    "ContentResolver",
    "Side",
    "StagedPair",
    "StagingArea",
    "sanitize_name",
]
