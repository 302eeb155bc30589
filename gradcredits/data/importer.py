"""
Transcript import.

This module turns transcript data into candidate courses the student reviews
before they are added. It accepts either records already extracted by an
external document reader (a JSON list of semester/name/credits/grade) or
pasted transcript text, which it reads line by line.
"""

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import List

from ..config import (
    IMPORT_FALLBACK_NAME,
    IMPORT_FALLBACK_SEMESTER,
    PASS_MARKERS,
    SERVICE_LEARNING_MARKER,
)
from ..models import Category, Course, Grade, new_course_id

logger = logging.getLogger(__name__)

# "111-1", "111/1", "111.1", "111上", "111 下"
_SEMESTER = re.compile(r"^(\d+)\s*(?:[-/.]\s*(\d+)|([上下]))")
_HALF_TERMS = {"上": 1, "下": 2}

# <semester> <course name> <credits> <grade>
_ROW = re.compile(
    r"^\s*(?P<semester>\d{2,3}\s*(?:[-/.]\s*\d|[上下]))\s+"
    r"(?P<name>.+?)\s+"
    r"(?P<credits>\d+(?:\.\d+)?)\s+"
    r"(?P<grade>\S+)\s*$"
)


class TranscriptImportError(ValueError):
    """Raised when no courses could be extracted; nothing is imported."""


def map_grade(raw) -> Grade:
    """
    Map a raw transcript grade onto the closed grade set.

    Letter grades match exactly (case-insensitive). 通過, 免修, 抵免, P and
    PASS all mean Pass, and so does anything unreadable.
    """
    if raw is None:
        return Grade.PASS
    text = str(raw).strip().upper()
    if not text:
        return Grade.PASS
    for grade in Grade:
        if text == grade.value:
            return grade
    if any(marker in text for marker in PASS_MARKERS):
        return Grade.PASS
    logger.debug("Unrecognized grade %r, importing as Pass", raw)
    return Grade.PASS


def normalize_semester(raw) -> str:
    """Rewrite "111/1" or "111上" as "111-1"; leave other labels alone."""
    text = str(raw or "").strip()
    if not text:
        return IMPORT_FALLBACK_SEMESTER
    match = _SEMESTER.match(text)
    if not match:
        return text
    year, term, half = match.groups()
    if half:
        term = _HALF_TERMS[half]
    return f"{int(year)}-{int(term)}"


def _to_credits(value):
    """Credits as a number; anything unreadable becomes 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return 0 if isinstance(value, float) and math.isnan(value) else value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number):
        return 0
    return int(number) if number.is_integer() else number


@dataclass
class ImportCandidate:
    """
    One extracted row awaiting review.

    The category is only a placeholder; the student is expected to fix it
    before committing, since a transcript does not say which graduation
    bucket a course belongs to.
    """
    temp_id: str
    semester: str
    name: str
    credits: float
    grade: Grade
    category: Category = Category.GENERAL_ELECTIVE
    is_current: bool = False


class TranscriptImporter:
    """
    Builds reviewable course candidates from transcript data.

    ALL-OR-NOTHING: every from_* method either returns a non-empty candidate
    list or raises TranscriptImportError. Nothing reaches the course list
    until commit() is called on the reviewed candidates.

    Usage:
        importer = TranscriptImporter()
        candidates = importer.from_text(pasted_text)
        # ... student adjusts categories ...
        courses = importer.commit(candidates)
    """

    def __init__(self, default_category: Category = Category.GENERAL_ELECTIVE):
        self.default_category = default_category

    def from_records(self, records) -> List[ImportCandidate]:
        """
        Map extracted records to candidates.

        Each record is a dict with semester, name, credits and grade. Missing
        fields fall back to a placeholder semester, "Unknown Course" and 0
        credits; grades go through map_grade().
        """
        if not isinstance(records, list) or not records:
            raise TranscriptImportError("No courses found")

        candidates = []
        for idx, item in enumerate(records):
            if not isinstance(item, dict):
                continue
            candidates.append(ImportCandidate(
                temp_id=f"parsed-{idx}",
                semester=normalize_semester(item.get("semester")),
                name=str(item.get("name") or IMPORT_FALLBACK_NAME).strip(),
                credits=_to_credits(item.get("credits")),
                grade=map_grade(item.get("grade")),
                category=self.default_category,
            ))

        if not candidates:
            raise TranscriptImportError("No courses found")
        logger.info("Extracted %d course candidates", len(candidates))
        return candidates

    def from_text(self, text: str) -> List[ImportCandidate]:
        """
        Read pasted transcript rows of the form "<semester> <name> <credits> <grade>".

        Lines that do not look like a course row are ignored. Zero-credit
        rows are dropped unless they are service learning.
        """
        records = []
        for line in (text or "").splitlines():
            match = _ROW.match(line)
            if not match:
                continue
            record = match.groupdict()
            if _to_credits(record["credits"]) == 0 and SERVICE_LEARNING_MARKER not in record["name"]:
                continue
            records.append(record)

        if not records:
            raise TranscriptImportError("No course rows found in the pasted text")
        return self.from_records(records)

    def from_json_file(self, path) -> List[ImportCandidate]:
        """Load records written by an external extractor (a list, or {"courses": [...]})."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise TranscriptImportError(f"Could not read {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("courses")
        return self.from_records(data)

    def commit(self, candidates: List[ImportCandidate]) -> List[Course]:
        """
        Turn reviewed candidates into courses with fresh identifiers.

        Rows with an empty name or non-numeric credits are skipped.
        """
        courses = []
        for c in candidates:
            if not c.name or not isinstance(c.credits, (int, float)) or isinstance(c.credits, bool):
                continue
            if isinstance(c.credits, float) and math.isnan(c.credits):
                continue
            courses.append(Course(
                id=new_course_id(),
                semester=c.semester,
                name=c.name,
                credits=c.credits,
                category=Category.coerce(c.category) or c.category,
                grade=Grade.coerce(c.grade) or c.grade,
                is_current=bool(c.is_current),
            ))
        return courses
