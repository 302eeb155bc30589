"""
Graduation Credit Tracker
=========================

Tracks a student's completed and in-progress courses against the graduation
requirements of NTU Accounting (111 entry cohort): credits per requirement
bucket, earned vs. projected, and current vs. projected GPA.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────────────┐      ┌──────────────────────────────┐     │
│  │    compute_progress      │      │   sort_for_display /         │     │
│  │ (credits + GPA folding)  │      │   group_by_category          │     │
│  └──────────────────────────┘      └──────────────────────────────┘     │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
┌─────────────────────────────────────────────────────────────────────────┐
│                           DATA LAYER                                     │
│  PantryStore / JsonFileStore   DebouncedSaver   TranscriptImporter      │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        CreditTracker                                     │
│   (Owns the course list, schedules saves, feeds TerminalDisplay)        │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

gradcredits/
├── __init__.py          # This file - main exports
├── config.py            # Requirements, grade points, storage settings
├── tracker.py           # CreditTracker state container
├── cli.py               # Command-line interface
├── models/              # Category, Grade, Course, Requirements, ProgressReport
├── engines/             # Progress aggregation, chronological ordering
├── data/                # Stores, debounced saver, transcript import
└── ui/                  # TerminalDisplay

USAGE
-----

    from gradcredits import Course, compute_progress, DEFAULT_REQUIREMENTS

    courses = [
        Course.create("111-1", "會計學原理", 3, "系訂必修", "A+"),
        Course.create("111-2", "經濟學", 3, "系訂必修", "B", is_current=True),
    ]
    report = compute_progress(courses, DEFAULT_REQUIREMENTS)
    report.current_gpa      # 4.3
    report.projected_gpa    # 3.65

Running from command line:

    python -m gradcredits

"""

# Version
__version__ = "1.0.0"

# Main exports
from .tracker import CreditTracker, make_store
from .cli import main

# Model exports
from .models import (
    Category,
    Grade,
    Course,
    CREDIT_CATEGORIES,
    grade_point,
    Requirements,
    CreditTally,
    ProgressReport,
    CategoryProgress,
    DEFAULT_REQUIREMENTS,
)

# Engine exports
from .engines import (
    ProgressEngine,
    compute_progress,
    derive_category_progress,
    compare_for_display,
    sort_for_display,
    group_by_category,
    parse_semester,
)

# Data exports
from .data import (
    PantryStore,
    JsonFileStore,
    StoreError,
    DebouncedSaver,
    SyncStatus,
    TranscriptImporter,
    TranscriptImportError,
)

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "CreditTracker",
    "make_store",
    "main",
    # Models
    "Category",
    "Grade",
    "Course",
    "CREDIT_CATEGORIES",
    "grade_point",
    "Requirements",
    "CreditTally",
    "ProgressReport",
    "CategoryProgress",
    "DEFAULT_REQUIREMENTS",
    # Engines
    "ProgressEngine",
    "compute_progress",
    "derive_category_progress",
    "compare_for_display",
    "sort_for_display",
    "group_by_category",
    "parse_semester",
    # Data
    "PantryStore",
    "JsonFileStore",
    "StoreError",
    "DebouncedSaver",
    "SyncStatus",
    "TranscriptImporter",
    "TranscriptImportError",
    # UI
    "TerminalDisplay",
]
