# tests/test_models.py
from dataclasses import FrozenInstanceError

import pytest

from gradcredits.models import (
    CREDIT_CATEGORIES,
    DEFAULT_REQUIREMENTS,
    Category,
    Course,
    Grade,
    grade_point,
)


@pytest.mark.parametrize("value", [
    Category.DEPT_REQUIRED,
    "系訂必修",
    "DEPT_REQUIRED",
    "DeptRequired",
    "  系訂必修 ",
])
def test_category_coerce_accepts_all_spellings(value):
    assert Category.coerce(value) is Category.DEPT_REQUIRED


@pytest.mark.parametrize("value", ["Unknown", "", None, 3, "dept"])
def test_category_coerce_unknown_returns_none(value):
    assert Category.coerce(value) is None


def test_credit_categories_exclude_pe_and_other():
    assert len(CREDIT_CATEGORIES) == 5
    assert Category.PHYSICAL_EDUCATION not in CREDIT_CATEGORIES
    assert Category.OTHER not in CREDIT_CATEGORIES


@pytest.mark.parametrize("grade,point", [
    ("A+", 4.3), ("A", 4.0), ("A-", 3.7),
    ("B+", 3.3), ("B", 3.0), ("B-", 2.7),
    ("C+", 2.3), ("C", 2.0), ("C-", 1.7),
    ("F", 0.0), (Grade.B, 3.0),
])
def test_grade_points(grade, point):
    assert grade_point(grade) == point


@pytest.mark.parametrize("grade", ["Pass", Grade.PASS, "D", "a+", "", None, 4.0])
def test_grade_point_excluded_values(grade):
    assert grade_point(grade) is None


def test_course_create_generates_unique_ids():
    a = Course.create("111-1", "審計學", 3, "系訂必修", "A")
    b = Course.create("111-1", "審計學", 3, "系訂必修", "A")
    assert a.id != b.id
    assert a.category is Category.DEPT_REQUIRED
    assert a.grade is Grade.A
    assert a.is_current is False


def test_course_from_dict_keeps_legacy_values():
    course = Course.from_dict({
        "id": "x1",
        "semester": "110-2",
        "name": "Old Course",
        "credits": 2,
        "category": "Unknown",
        "grade": "P+",
    })
    assert course.category == "Unknown"
    assert course.grade == "P+"
    assert course.is_current is False
    assert course.to_dict()["category"] == "Unknown"


def test_course_from_dict_coerces_credits():
    assert Course.from_dict({"credits": "3"}).credits == 3
    assert Course.from_dict({"credits": "2.5"}).credits == 2.5
    assert Course.from_dict({"credits": "abc"}).credits == 0
    assert Course.from_dict({}).credits == 0


def test_course_from_dict_generates_missing_id():
    assert Course.from_dict({"name": "x"}).id


def test_course_to_dict_uses_stored_labels():
    course = Course("c1", "112-1", "通識課", 2, Category.GENERAL_EDUCATION, Grade.A_MINUS, True)
    assert course.to_dict() == {
        "id": "c1",
        "semester": "112-1",
        "name": "通識課",
        "credits": 2,
        "category": "通識",
        "grade": "A-",
        "isCurrent": True,
    }
    assert Course.from_dict(course.to_dict()) == course


def test_requirements_targets():
    assert DEFAULT_REQUIREMENTS.total == 133
    assert DEFAULT_REQUIREMENTS.target_for(Category.DEPT_REQUIRED) == 69
    assert DEFAULT_REQUIREMENTS.target_for(Category.COMMON_REQUIRED) == 9
    assert DEFAULT_REQUIREMENTS.target_for(Category.PHYSICAL_EDUCATION) is None
    assert DEFAULT_REQUIREMENTS.target_for(Category.OTHER) is None


def test_requirements_are_immutable():
    with pytest.raises(FrozenInstanceError):
        DEFAULT_REQUIREMENTS.total = 1
