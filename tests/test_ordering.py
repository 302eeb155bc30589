# tests/test_ordering.py
import pytest

from gradcredits.engines import (
    DISPLAY_SECTIONS,
    compare_for_display,
    group_by_category,
    parse_semester,
    sort_for_display,
)
from gradcredits.models import Category


@pytest.mark.parametrize("label,expected", [
    ("111-2", (111, 2)),
    ("111/1", (111, 1)),
    ("112上", (112, 0)),
    ("109", (109, 0)),
    ("  110 - 2  ", (110, 2)),
    ("111-1-3", (111, 1)),
    ("summer", (0, 0)),
    ("", (0, 0)),
    (None, (0, 0)),
])
def test_parse_semester(label, expected):
    assert parse_semester(label) == expected


def test_sorts_semesters_oldest_first(make_course):
    courses = [make_course(semester=s) for s in ("111-2", "111-1", "112-1", "109")]
    assert [c.semester for c in sort_for_display(courses)] == ["109", "111-1", "111-2", "112-1"]


def test_label_without_digits_sorts_first(make_course):
    courses = [make_course(semester="111-1"), make_course(semester="TBD")]
    assert sort_for_display(courses)[0].semester == "TBD"


def test_name_breaks_ties(make_course):
    courses = [
        make_course(semester="111-1", name="Statistics"),
        make_course(semester="111-1", name="Accounting"),
        make_course(semester="110-2", name="Zoology"),
    ]
    assert [c.name for c in sort_for_display(courses)] == ["Zoology", "Accounting", "Statistics"]


def test_equal_courses_keep_original_order(make_course):
    first = make_course(semester="111-1", name="Economics")
    second = make_course(semester="111-1", name="Economics")
    assert sort_for_display([first, second]) == [first, second]
    assert sort_for_display([second, first]) == [second, first]


def test_compare_for_display(make_course):
    older = make_course(semester="110-1", name="B")
    newer = make_course(semester="110-2", name="A")
    twin = make_course(semester="110-1", name="B")

    assert compare_for_display(older, newer) == -1
    assert compare_for_display(newer, older) == 1
    assert compare_for_display(older, twin) == 0


def test_sort_does_not_mutate_input(make_course):
    courses = [make_course(semester="112-1"), make_course(semester="111-1")]
    original = list(courses)
    sort_for_display(courses)
    assert courses == original


def test_group_by_category(make_course):
    courses = [
        make_course(category="系訂必修", semester="112-1"),
        make_course(category="體育", semester="111-1"),
        make_course(category="Unknown", semester="111-2"),
        make_course(category="系訂必修", semester="111-1"),
        make_course(category="其他", semester="110-1"),
    ]
    groups = group_by_category(courses)

    assert list(groups) == list(DISPLAY_SECTIONS)
    assert [c.semester for c in groups[Category.DEPT_REQUIRED]] == ["111-1", "112-1"]
    # PE is listed even though it never counts toward credits
    assert len(groups[Category.PHYSICAL_EDUCATION]) == 1
    # unrecognized categories display under Other
    assert [c.semester for c in groups[Category.OTHER]] == ["110-1", "111-2"]
    assert groups[Category.GENERAL_EDUCATION] == []


def test_full_width_digits_are_not_numbers():
    assert parse_semester("１１１-１") == (0, 0)
    assert parse_semester("１１１ 112-2") == (112, 2)
