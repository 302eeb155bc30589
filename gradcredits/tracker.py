"""
Credit Tracker - Main Orchestrator.

This module contains the CreditTracker class, the single owner of the course
list. It connects the engines to storage and to the presentation layer.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .config import LOCAL_STORE_PATH, STORE_BACKEND
from .data import CourseStore, DebouncedSaver, JsonFileStore, PantryStore, StoreError, SyncStatus
from .engines import ProgressEngine, group_by_category
from .models import (
    DEFAULT_REQUIREMENTS,
    Category,
    CategoryProgress,
    Course,
    Grade,
    ProgressReport,
    Requirements,
    coerce_credits,
)
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


def make_store(backend: str = STORE_BACKEND) -> CourseStore:
    """Store selected by name: "local" for a JSON file, anything else for Pantry."""
    if backend == "local":
        return JsonFileStore(LOCAL_STORE_PATH)
    return PantryStore()


class CreditTracker:
    """
    Main interface for the credit tracker.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: STATE CONTAINER + ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Owns the one course list (nothing else mutates it)
    2. After every edit, hands a snapshot to the debounced saver
    3. Derives progress and the grouped table from the full list on every
       read; nothing is cached or updated incrementally
    4. Passes results to the display for printing

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        tracker = CreditTracker()
        tracker.load()
        tracker.add_course(Course.create("112-1", "審計學", 3, "系訂必修", "A"))
        report = tracker.progress()
        tracker.close()
    """

    def __init__(self, store: Optional[CourseStore] = None,
                 requirements: Requirements = DEFAULT_REQUIREMENTS,
                 saver: Optional[DebouncedSaver] = None,
                 display: Optional[TerminalDisplay] = None):
        self.store = store if store is not None else make_store()
        self.requirements = requirements
        self.engine = ProgressEngine(requirements)
        self.saver = saver if saver is not None else DebouncedSaver(self.store.save)
        self.display = display or TerminalDisplay()
        self._courses: List[Course] = []
        self._initialized = False

    # -------------------------------------------------------------------------
    # Loading and saving
    # -------------------------------------------------------------------------

    def load(self) -> bool:
        """
        Load the stored course list.

        Returns False if the store could not be reached; the tracker then
        starts with an empty list. Saving is enabled either way.
        """
        try:
            loaded = self.store.load()
        except StoreError as e:
            logger.error("Failed to load courses: %s", e)
            self._initialized = True
            return False

        self._courses = list(loaded or [])
        self._initialized = True
        logger.info("Loaded %d courses", len(self._courses))
        return True

    def close(self) -> SyncStatus:
        """Save anything still pending. Call before exiting."""
        return self.saver.flush()

    @property
    def sync_status(self) -> SyncStatus:
        return self.saver.status

    def _changed(self) -> None:
        if self._initialized:
            self.saver.schedule(self.courses)

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    @property
    def courses(self) -> Tuple[Course, ...]:
        """Snapshot of the course list in entry order."""
        return tuple(self._courses)

    def get_course(self, course_id: str) -> Course:
        for course in self._courses:
            if course.id == course_id:
                return course
        raise KeyError(course_id)

    def add_course(self, course: Course) -> None:
        self._courses.append(course)
        self._changed()

    def add_courses(self, courses) -> None:
        """Append a batch (e.g. a reviewed import) as one edit."""
        batch = list(courses)
        if not batch:
            return
        self._courses.extend(batch)
        self._changed()

    def update_course(self, course: Course) -> None:
        """Replace the course that has the same id."""
        for idx, existing in enumerate(self._courses):
            if existing.id == course.id:
                self._courses[idx] = course
                self._changed()
                return
        raise KeyError(course.id)

    def edit_course(self, course_id: str, **changes) -> Course:
        """Change some fields of a course; the id is never changed."""
        changes.pop("id", None)
        if "category" in changes:
            changes["category"] = Category.coerce(changes["category"]) or changes["category"]
        if "grade" in changes:
            changes["grade"] = Grade.coerce(changes["grade"]) or changes["grade"]
        if "credits" in changes:
            changes["credits"] = coerce_credits(changes["credits"])
        updated = replace(self.get_course(course_id), **changes)
        self.update_course(updated)
        return updated

    def delete_course(self, course_id: str) -> Course:
        for idx, existing in enumerate(self._courses):
            if existing.id == course_id:
                del self._courses[idx]
                self._changed()
                return existing
        raise KeyError(course_id)

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def progress(self) -> ProgressReport:
        return self.engine.compute(self._courses)

    def category_progress(self) -> List[CategoryProgress]:
        return self.engine.measure(self.progress())

    def grouped_courses(self) -> Dict[Category, List[Course]]:
        return group_by_category(self._courses)

    def show_summary(self) -> ProgressReport:
        report = self.progress()
        self.display.print_summary(report, self.engine.measure(report))
        self.display.print_sync_status(self.sync_status)
        return report

    def show_courses(self) -> Dict[Category, List[Course]]:
        groups = self.grouped_courses()
        self.display.print_course_table(groups)
        return groups
