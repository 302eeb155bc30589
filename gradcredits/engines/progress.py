"""
Credit and GPA Aggregation Engine.

This module folds a course list into a ProgressReport: earned and projected
credits per graduation bucket, and the current and projected GPA.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from ..models import (
    BUCKET_FIELDS,
    CREDIT_CATEGORIES,
    Category,
    CategoryProgress,
    Course,
    CreditTally,
    ProgressReport,
    Requirements,
    grade_point,
)


def bucket_for(category) -> Category:
    """
    Credit bucket a course category counts toward.

    Other and anything unrecognized (legacy labels, typos, None) count as
    General Elective. PE is returned as-is; callers skip it.
    """
    member = Category.coerce(category)
    if member is None or member is Category.OTHER:
        return Category.GENERAL_ELECTIVE
    return member


def _credits_of(course: Course):
    credits = course.credits
    if isinstance(credits, bool) or not isinstance(credits, (int, float)):
        return 0
    return credits


def _ratio(points: float, weight: float) -> float:
    if weight <= 0:
        return 0.0
    # quantize the exact binary value; exact ties round up
    return float(Decimal(points / weight).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def compute_progress(courses: Iterable[Course], requirements: Requirements) -> ProgressReport:
    """
    Aggregate credits and GPA for a list of courses.

    CREDIT RULES:
    -------------
    - PE (體育) never counts toward any bucket or the total.
    - Other and unrecognized categories count as General Elective.
    - In-progress courses (is_current) go to "projected", the rest to "earned".

    GPA RULES:
    ----------
    - Only courses with a letter grade, positive credits, and not PE.
    - current_gpa uses finished courses only.
    - projected_gpa is cumulative: finished courses plus in-progress ones
      at their expected grade.
    - Both are 0 when no course qualifies, and rounded to 2 places.

    The requirements do not change the sums; derive_category_progress()
    measures the report against them.

    Never mutates the courses and never raises on odd category or grade
    values.
    """
    sums = {category: [0, 0] for category in CREDIT_CATEGORIES}
    total = [0, 0]

    earned_points = 0.0
    earned_weight = 0
    projected_points = 0.0
    projected_weight = 0

    for course in courses:
        category = Category.coerce(course.category)
        if category is Category.PHYSICAL_EDUCATION:
            continue

        credits = _credits_of(course)
        slot = 1 if course.is_current else 0
        sums[bucket_for(category)][slot] += credits
        total[slot] += credits

        point = grade_point(course.grade)
        if point is None or credits <= 0:
            continue
        if course.is_current:
            projected_points += point * credits
            projected_weight += credits
        else:
            earned_points += point * credits
            earned_weight += credits

    tallies = {
        BUCKET_FIELDS[category]: CreditTally(earned=values[0], projected=values[1])
        for category, values in sums.items()
    }
    return ProgressReport(
        total=CreditTally(earned=total[0], projected=total[1]),
        current_gpa=_ratio(earned_points, earned_weight),
        projected_gpa=_ratio(earned_points + projected_points,
                             earned_weight + projected_weight),
        **tallies,
    )


def _percent(value, target) -> float:
    if target <= 0:
        return 100.0
    return min(value * 100 / target, 100.0)


def _measure(key: str, tally: CreditTally, target) -> CategoryProgress:
    return CategoryProgress(
        key=key,
        target=target,
        earned=tally.earned,
        projected=tally.projected,
        met=tally.earned >= target,
        met_projected=tally.combined >= target,
        earned_percent=_percent(tally.earned, target),
        projected_percent=_percent(tally.combined, target),
    )


def derive_category_progress(report: ProgressReport,
                             requirements: Requirements) -> List[CategoryProgress]:
    """
    Measure each credit bucket, then the total, against its target.

    Returns six entries: the five credit categories in summary order
    followed by "total".
    """
    results = []
    for category in CREDIT_CATEGORIES:
        key = BUCKET_FIELDS[category]
        results.append(_measure(key, report.tally_for(category), requirements.target_for(category)))
    results.append(_measure("total", report.total, requirements.total))
    return results


class ProgressEngine:
    """
    Computes progress against one fixed set of graduation requirements.

    The engine holds no state besides the requirements, so calling it twice
    on the same list always gives the same report. Nothing is cached.

    Usage:
        engine = ProgressEngine(DEFAULT_REQUIREMENTS)
        report = engine.compute(courses)
        rows = engine.measure(report)
    """

    def __init__(self, requirements: Requirements):
        self.requirements = requirements

    def compute(self, courses: Iterable[Course]) -> ProgressReport:
        return compute_progress(courses, self.requirements)

    def measure(self, report: ProgressReport) -> List[CategoryProgress]:
        return derive_category_progress(report, self.requirements)
