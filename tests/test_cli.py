# tests/test_cli.py
import builtins

import pytest

from fakes import MemoryStore
from gradcredits import cli
from gradcredits.data import DebouncedSaver, ImportCandidate
from gradcredits.models import Category, Course, Grade
from gradcredits.tracker import CreditTracker


def _feed(monkeypatch, answers):
    replies = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.fixture
def store(monkeypatch, timer_factory):
    store = MemoryStore()
    monkeypatch.setattr(
        cli, "CreditTracker",
        lambda: CreditTracker(store=store, saver=DebouncedSaver(store.save, timer_factory=timer_factory)),
    )
    return store


def test_add_course_then_quit_saves(monkeypatch, store, capsys):
    _feed(monkeypatch, [
        "3",        # add
        "111-1",    # semester
        "審計學",    # name
        "3",        # credits
        "1",        # category: Dept Required
        "1",        # grade: A+
        "n",        # not in progress
        "1",        # summary
        "q",
    ])
    cli.main()

    assert len(store.saved) == 1
    (course,) = store.saved[0]
    assert course.name == "審計學"
    assert course.category is Category.DEPT_REQUIRED
    assert course.grade is Grade.A_PLUS
    assert "4.30" in capsys.readouterr().out


def test_pick_common_course_by_number(monkeypatch, store):
    _feed(monkeypatch, ["3", "", "1", "", "", "", "y", "q"])
    cli.main()

    (course,) = store.saved[0]
    assert course.name == "會計學原理"
    assert course.semester == "113-2"
    assert course.credits == 3
    assert course.is_current is True


def test_end_of_input_quits_cleanly(monkeypatch, store):
    _feed(monkeypatch, [])
    cli.main()
    assert store.saved == []


def test_review_candidates(monkeypatch):
    candidates = [
        ImportCandidate("t1", "111-1", "統計學", 3, Grade.A),
        ImportCandidate("t2", "111-1", "經濟學", 3, Grade.B),
    ]
    _feed(monkeypatch, ["c all 3", "t 1", "d 2", "bogus 9", ""])

    assert cli._review_candidates(candidates) is True
    assert [c.name for c in candidates] == ["統計學"]
    assert candidates[0].category is Category.DESIGNATED_ELECTIVE
    assert candidates[0].is_current is True


def test_review_cancel(monkeypatch):
    candidates = [ImportCandidate("t1", "111-1", "統計學", 3, Grade.A)]
    _feed(monkeypatch, ["x"])
    assert cli._review_candidates(candidates) is False


def test_import_from_pasted_text(monkeypatch, store):
    _feed(monkeypatch, [
        "6",                        # import
        "1",                        # paste text
        "111-1 會計學原理 3 A+",
        "111-2 民法概要 2 B",
        "",                         # end of paste
        "c all 1",                  # everything is Dept Required
        "",                         # import
        "q",
    ])
    cli.main()

    saved = store.saved[-1]
    assert [c.name for c in saved] == ["會計學原理", "民法概要"]
    assert all(c.category is Category.DEPT_REQUIRED for c in saved)


def test_edit_keeps_in_progress_flag_on_empty_answers(monkeypatch, timer_factory):
    store = MemoryStore()
    tracker = CreditTracker(store=store, saver=DebouncedSaver(store.save, timer_factory=timer_factory))
    tracker.load()
    course = Course.create("113-2", "審計學", 3, Category.DEPT_REQUIRED, Grade.A, is_current=True)
    tracker.add_course(course)

    _feed(monkeypatch, [course.id[:8]] + [""] * 10)
    cli._edit_course(tracker)

    edited = tracker.get_course(course.id)
    assert edited.is_current is True
    assert edited.semester == "113-2"
    assert edited.credits == 3
    assert edited.category is Category.DEPT_REQUIRED
    assert edited.grade is Grade.A
    assert tracker.progress().dept_required.projected == 3
