"""
Configuration constants for the credit tracker.

This module contains all configuration values and constants used throughout
the tracker. Centralizing these makes it easy to adjust behavior when the
department changes its graduation rules or the storage basket moves.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
LOCAL_STORE_PATH = DATA_DIR / "courses.json"


# =============================================================================
# REMOTE STORAGE (Pantry)
# =============================================================================
# The course list lives in a single Pantry basket. Pantry returns 400 for a
# basket that has never been written, which we treat as "no prior state".

PANTRY_ID = "7221a69a-c255-469e-86bf-7c36ba6f90f6"
BASKET_NAME = "ntu-accounting-courses"
PANTRY_URL = os.environ.get(
    "GRADCREDITS_PANTRY_URL",
    f"https://getpantry.cloud/apiv1/pantry/{PANTRY_ID}/basket/{BASKET_NAME}",
)

# "pantry" or "local"
STORE_BACKEND = os.environ.get("GRADCREDITS_STORE", "pantry").lower()

REQUEST_TIMEOUT = 15           # seconds per request
RETRY_TOTAL = 3
RETRY_BACKOFF_FACTOR = 1       # 1s, 2s, 4s between attempts
RETRY_STATUS_FORCELIST = [429, 500, 502, 503, 504]

# Rapid edits are coalesced into one save after this quiet period.
SAVE_DEBOUNCE_SECONDS = 1.0


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# NTU 4.3 scale. Pass carries no grade point and is left out of GPA.
GRADE_POINTS = {
    "A+": 4.3,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "F": 0.0,
    "Pass": None,
}

# Raw transcript marks that all mean "passed without a letter grade":
# 通過 (passed), 免修 (exempted), 抵免 (credit transferred).
PASS_MARKERS = ("通過", "免修", "抵免", "P", "PASS")


# =============================================================================
# GRADUATION REQUIREMENTS
# =============================================================================
# NTU Accounting, 111 entry cohort:
#   共同必修(9) + 系訂必修(69) + 指定選修(21) + 一般選修(19) + 通識(15) = 133
# PE (體育) is listed on the transcript but never counts toward graduation.

ACCOUNTING_111_REQUIREMENTS = {
    "total": 133,
    "common_required": 9,
    "dept_required": 69,
    "designated_elective": 21,
    "general_elective": 19,
    "general_education": 15,
}


# =============================================================================
# ENTRY DEFAULTS
# =============================================================================

DEFAULT_SEMESTER = "113-2"
DEFAULT_CREDITS = 3

# Imported rows with no readable semester land here until the user fixes them.
IMPORT_FALLBACK_SEMESTER = "111-1"
IMPORT_FALLBACK_NAME = "Unknown Course"

# Zero-credit rows are dropped on import except for service learning.
SERVICE_LEARNING_MARKER = "服務學習"

# Name suggestions offered when adding a course by hand.
COMMON_COURSES = [
    "會計學原理",
    "微積分(乙)",
    "經濟學",
    "民法概要",
    "中級會計學",
    "成本與管理會計學",
    "統計學",
    "企業管理",
    "商事法",
    "高等會計學",
    "審計學",
    "財務管理",
    "稅務法規",
    "會計資訊系統",
]
