"""
Chronological ordering of courses for display.

Semester labels are free text ("111-1", "111/2", "112上", "109"), so we only
look at the numbers in them: the first is the academic year, the second the
term.
"""

import locale
import re
from typing import Dict, Iterable, List, Tuple

from ..models import Category, Course

_NUMBER = re.compile(r"[0-9]+")

# Section order of the course table. PE is shown even though it never
# counts toward credits.
DISPLAY_SECTIONS = (
    Category.COMMON_REQUIRED,
    Category.PHYSICAL_EDUCATION,
    Category.DEPT_REQUIRED,
    Category.DESIGNATED_ELECTIVE,
    Category.GENERAL_ELECTIVE,
    Category.GENERAL_EDUCATION,
    Category.OTHER,
)


def parse_semester(label) -> Tuple[int, int]:
    """
    Split a semester label into (academic year, term).

    Missing numbers default to 0:
        "111-2" -> (111, 2)
        "109"   -> (109, 0)
        "summer" -> (0, 0)
    """
    if not isinstance(label, str):
        return 0, 0
    numbers = [int(token) for token in _NUMBER.findall(label)[:2]]
    year = numbers[0] if numbers else 0
    term = numbers[1] if len(numbers) > 1 else 0
    return year, term


def display_key(course: Course) -> tuple:
    """Sort key: year, then term, then course name in locale order."""
    year, term = parse_semester(course.semester)
    return year, term, locale.strxfrm(course.name or "")


def compare_for_display(a: Course, b: Course) -> int:
    """Return -1 if a comes before b, 1 if after, 0 if they tie."""
    key_a = display_key(a)
    key_b = display_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_for_display(courses: Iterable[Course]) -> List[Course]:
    """Oldest first. Ties keep their original relative order."""
    return sorted(courses, key=display_key)


def group_by_category(courses: Iterable[Course]) -> Dict[Category, List[Course]]:
    """
    Group courses into table sections, each sorted chronologically.

    Courses whose category is not recognized are shown under Other. Every
    section is present in the result, possibly empty, in DISPLAY_SECTIONS
    order.
    """
    groups = {category: [] for category in DISPLAY_SECTIONS}
    for course in courses:
        category = Category.coerce(course.category) or Category.OTHER
        groups[category].append(course)
    return {category: sort_for_display(items) for category, items in groups.items()}
