"""
Course data models.

Contains the Category and Grade enums, the grade-point table, and the Course
dataclass that represents one line of the student's academic record.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..config import GRADE_POINTS


class Category(Enum):
    """
    Graduation-requirement buckets a course can be filed under.

    Values are the labels stored in the basket, so data written by earlier
    versions of the tracker loads without migration.
    """
    COMMON_REQUIRED = "共同必修"
    DEPT_REQUIRED = "系訂必修"
    DESIGNATED_ELECTIVE = "指定選修"
    GENERAL_ELECTIVE = "一般選修"
    GENERAL_EDUCATION = "通識"
    PHYSICAL_EDUCATION = "體育"
    OTHER = "其他"

    @property
    def label(self) -> str:
        """English name shown next to the stored label."""
        return CATEGORY_LABELS[self]

    @classmethod
    def coerce(cls, value) -> Optional["Category"]:
        """
        Resolve a stored or typed category to a member.

        Accepts a member, its stored label ("系訂必修"), its member name
        ("DEPT_REQUIRED") or its CamelCase name ("DeptRequired"). Anything
        else returns None; callers decide the fallback.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        text = value.strip()
        for member in cls:
            if text in (member.value, member.name, _camel(member.name)):
                return member
        return None


def _camel(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


CATEGORY_LABELS = {
    Category.COMMON_REQUIRED: "Common Required",
    Category.DEPT_REQUIRED: "Dept Required",
    Category.DESIGNATED_ELECTIVE: "Designated Elective",
    Category.GENERAL_ELECTIVE: "General Elective",
    Category.GENERAL_EDUCATION: "General Education",
    Category.PHYSICAL_EDUCATION: "Physical Education",
    Category.OTHER: "Other",
}

# The five buckets that carry a credit target, in summary order.
CREDIT_CATEGORIES = (
    Category.COMMON_REQUIRED,
    Category.DEPT_REQUIRED,
    Category.DESIGNATED_ELECTIVE,
    Category.GENERAL_ELECTIVE,
    Category.GENERAL_EDUCATION,
)


class Grade(Enum):
    """Letter grades on the NTU 4.3 scale plus the non-letter Pass mark."""
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    F = "F"
    PASS = "Pass"

    @property
    def point(self) -> Optional[float]:
        return GRADE_POINTS[self.value]

    @classmethod
    def coerce(cls, value) -> Optional["Grade"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        text = value.strip()
        for member in cls:
            if text == member.value:
                return member
        return None


def grade_point(grade) -> Optional[float]:
    """
    Grade point for a grade, or None when the grade does not enter GPA.

    Pass and every value outside the closed grade set return None, so a
    legacy or mistyped grade is excluded instead of raising.
    """
    member = Grade.coerce(grade)
    if member is None:
        return None
    return member.point


def new_course_id() -> str:
    return str(uuid.uuid4())


def coerce_credits(value) -> Union[int, float]:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return int(number) if number.is_integer() else number


@dataclass
class Course:
    """
    Represents a single course on the student's record.

    This is the core data unit that flows through the system. The list of
    Course objects is the only state that gets persisted; every summary is
    derived from it.

    Attributes:
        id: Opaque identifier, stable across edits
        semester: Free-text term label (e.g., "111-1"), not validated
        name: Course name as the student entered or imported it
        credits: Non-negative credit count
        category: Category member, or the raw value if it is not recognized
        grade: Grade member, or the raw value if it is not recognized
        is_current: True while the course is in progress this semester
    """
    id: str
    semester: str
    name: str
    credits: Union[int, float]
    category: Union[Category, str]
    grade: Union[Grade, str]
    is_current: bool = False

    @classmethod
    def create(cls, semester: str, name: str, credits, category, grade,
               is_current: bool = False) -> "Course":
        """Build a brand-new course with a freshly generated identifier."""
        return cls(
            id=new_course_id(),
            semester=semester,
            name=name,
            credits=coerce_credits(credits),
            category=Category.coerce(category) or category,
            grade=Grade.coerce(grade) or grade,
            is_current=bool(is_current),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Course":
        """
        Build a Course from its persisted record.

        Unknown category or grade values are kept as-is so that nothing is
        lost on the next save; the aggregation engine knows how to fold them.
        """
        category = data.get("category")
        grade = data.get("grade")
        return cls(
            id=str(data.get("id") or new_course_id()),
            semester=str(data.get("semester", "")),
            name=str(data.get("name", "")),
            credits=coerce_credits(data.get("credits", 0)),
            category=Category.coerce(category) or category,
            grade=Grade.coerce(grade) or grade,
            is_current=bool(data.get("isCurrent", False)),
        )

    def to_dict(self) -> dict:
        """Persisted record, field names matching what the basket stores."""
        return {
            "id": self.id,
            "semester": self.semester,
            "name": self.name,
            "credits": self.credits,
            "category": self.category.value if isinstance(self.category, Category) else self.category,
            "grade": self.grade.value if isinstance(self.grade, Grade) else self.grade,
            "isCurrent": self.is_current,
        }
