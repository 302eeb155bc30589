"""
Progress data models.

Contains the Requirements configuration and the dataclasses produced by the
aggregation engine. None of these are persisted; they are rebuilt from the
course list every time they are needed.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..config import ACCOUNTING_111_REQUIREMENTS
from .course import Category

Number = Union[int, float]


@dataclass(frozen=True)
class Requirements:
    """
    Graduation credit targets for one program.

    Only the five credit-bearing categories have a target. PE and Other
    have none, and target_for() returns None for them.
    """
    total: Number
    common_required: Number
    dept_required: Number
    designated_elective: Number
    general_elective: Number
    general_education: Number

    def target_for(self, category: Category) -> Optional[Number]:
        field_name = BUCKET_FIELDS.get(category)
        if field_name is None:
            return None
        return getattr(self, field_name)


# Category -> attribute name used on both Requirements and ProgressReport
BUCKET_FIELDS = {
    Category.COMMON_REQUIRED: "common_required",
    Category.DEPT_REQUIRED: "dept_required",
    Category.DESIGNATED_ELECTIVE: "designated_elective",
    Category.GENERAL_ELECTIVE: "general_elective",
    Category.GENERAL_EDUCATION: "general_education",
}

DEFAULT_REQUIREMENTS = Requirements(**ACCOUNTING_111_REQUIREMENTS)


@dataclass(frozen=True)
class CreditTally:
    """Credits already earned and credits still in progress for one bucket."""
    earned: Number = 0
    projected: Number = 0

    @property
    def combined(self) -> Number:
        return self.earned + self.projected


@dataclass(frozen=True)
class ProgressReport:
    """
    Snapshot of credit progress and GPA derived from a course list.

    Example for one finished A+ and one in-progress B, both Dept Required:
        dept_required: CreditTally(earned=3, projected=3)
        total: CreditTally(earned=3, projected=3)
        current_gpa: 4.3
        projected_gpa: 3.65
    """
    common_required: CreditTally
    dept_required: CreditTally
    designated_elective: CreditTally
    general_elective: CreditTally
    general_education: CreditTally
    total: CreditTally
    current_gpa: float
    projected_gpa: float

    def tally_for(self, category: Category) -> Optional[CreditTally]:
        field_name = BUCKET_FIELDS.get(category)
        if field_name is None:
            return None
        return getattr(self, field_name)

    @property
    def current_gpa_text(self) -> str:
        return f"{self.current_gpa:.2f}"

    @property
    def projected_gpa_text(self) -> str:
        return f"{self.projected_gpa:.2f}"


@dataclass(frozen=True)
class CategoryProgress:
    """
    Display figures for one bucket measured against its target.

    Percentages are of the target and capped at 100.
    """
    key: str                   # bucket attribute name, or "total"
    target: Number
    earned: Number
    projected: Number
    met: bool                  # earned alone reaches the target
    met_projected: bool        # earned plus in-progress reaches the target
    earned_percent: float
    projected_percent: float   # earned plus in-progress, as a share of target
