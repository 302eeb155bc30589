"""
Progress and ordering engines.

This package contains the pure computations the tracker runs every time
the course list changes.
"""

from .progress import (
    ProgressEngine,
    compute_progress,
    derive_category_progress,
    bucket_for,
)
from .ordering import (
    DISPLAY_SECTIONS,
    parse_semester,
    display_key,
    compare_for_display,
    sort_for_display,
    group_by_category,
)

__all__ = [
    "ProgressEngine",
    "compute_progress",
    "derive_category_progress",
    "bucket_for",
    "DISPLAY_SECTIONS",
    "parse_semester",
    "display_key",
    "compare_for_display",
    "sort_for_display",
    "group_by_category",
]
