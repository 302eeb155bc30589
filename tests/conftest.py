# tests/conftest.py
from __future__ import annotations

import pytest

from fakes import FakeTimer
from gradcredits.models import Course


@pytest.fixture
def timers():
    return []


@pytest.fixture
def timer_factory(timers):
    def factory(interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args=args, kwargs=kwargs)
        timers.append(timer)
        return timer
    return factory


@pytest.fixture
def make_course():
    counter = {"n": 0}

    def factory(credits=3, grade="A", category="系訂必修", is_current=False,
                semester="111-1", name=None):
        counter["n"] += 1
        return Course(
            id=f"course-{counter['n']}",
            semester=semester,
            name=name or f"Course {counter['n']}",
            credits=credits,
            category=category,
            grade=grade,
            is_current=is_current,
        )
    return factory
