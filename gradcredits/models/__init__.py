"""
Data models for the credit tracker.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import (
    Category,
    Grade,
    Course,
    CATEGORY_LABELS,
    CREDIT_CATEGORIES,
    coerce_credits,
    grade_point,
    new_course_id,
)
from .progress import (
    Requirements,
    CreditTally,
    ProgressReport,
    CategoryProgress,
    BUCKET_FIELDS,
    DEFAULT_REQUIREMENTS,
)

__all__ = [
    # Course models
    "Category",
    "Grade",
    "Course",
    "CATEGORY_LABELS",
    "CREDIT_CATEGORIES",
    "coerce_credits",
    "grade_point",
    "new_course_id",
    # Progress models
    "Requirements",
    "CreditTally",
    "ProgressReport",
    "CategoryProgress",
    "BUCKET_FIELDS",
    "DEFAULT_REQUIREMENTS",
]
