"""Path normalisation and exclude filtering."""

from vsdiff.filters.exclude import (
    filter_records,
    is_excluded,
    is_record_excluded,
    partition_records,
)
from vsdiff.filters.paths import normalize_exclude, normalize_excludes, normalize_path

__all__ = [
    "filter_records",
    "is_excluded",
    "is_record_excluded",
    "normalize_exclude",
    "normalize_excludes",
    "normalize_path",
    "partition_records",
]
