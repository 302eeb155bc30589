"""
Course list persistence.

The whole course list is stored as one opaque payload, {"courses": [...]},
either in a Pantry basket (the default) or in a local JSON file.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    LOCAL_STORE_PATH,
    PANTRY_URL,
    REQUEST_TIMEOUT,
    RETRY_BACKOFF_FACTOR,
    RETRY_STATUS_FORCELIST,
    RETRY_TOTAL,
)
from ..models import Course

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the course list cannot be loaded or saved."""


def create_retry_session() -> requests.Session:
    """Session that backs off and retries on throttling and server errors."""
    session = requests.Session()
    retries = Retry(
        total=RETRY_TOTAL,
        backoff_factor=RETRY_BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_FORCELIST,
        allowed_methods=["GET", "POST"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.headers.update({"Content-Type": "application/json"})
    return session


def courses_from_payload(data) -> Optional[List[Course]]:
    """
    Extract the course list from a stored payload.

    Returns None when the payload has no "courses" list, which callers
    treat the same as an empty basket.
    """
    if not isinstance(data, dict):
        return None
    records = data.get("courses")
    if not isinstance(records, list):
        return None
    return [Course.from_dict(record) for record in records if isinstance(record, dict)]


def courses_to_payload(courses) -> dict:
    return {"courses": [course.to_dict() for course in courses]}


class CourseStore:
    """
    Interface every storage backend implements.

    load() returns the stored list, or None when there is no prior state.
    save() stores the full list, replacing whatever was there. Both raise
    StoreError on failure.
    """

    def load(self) -> Optional[List[Course]]:
        raise NotImplementedError

    def save(self, courses) -> None:
        raise NotImplementedError


class PantryStore(CourseStore):
    """
    Stores the course list in a Pantry basket over HTTPS.

    Pantry answers 400 for a basket that has never been written, so any
    non-OK response on load means "start fresh", not an error. Only
    network failures and unreadable bodies raise.
    """

    def __init__(self, url: str = PANTRY_URL, session: Optional[requests.Session] = None,
                 timeout: float = REQUEST_TIMEOUT):
        self.url = url
        self.session = session or create_retry_session()
        self.timeout = timeout

    def load(self) -> Optional[List[Course]]:
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise StoreError(f"Failed to load from Pantry: {e}") from e

        if not resp.ok:
            logger.info("No existing basket (HTTP %s). Starting fresh.", resp.status_code)
            return None

        try:
            data = resp.json()
        except ValueError as e:
            raise StoreError(f"Pantry returned an unreadable body: {e}") from e
        return courses_from_payload(data)

    def save(self, courses) -> None:
        payload = courses_to_payload(courses)
        try:
            resp = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise StoreError(f"Failed to save to Pantry: {e}") from e

        if not resp.ok:
            raise StoreError(f"Save failed: HTTP {resp.status_code}")
        logger.debug("Saved %d courses to Pantry", len(payload["courses"]))


class JsonFileStore(CourseStore):
    """Stores the course list in a local JSON file, for offline use."""

    def __init__(self, path=LOCAL_STORE_PATH):
        self.path = Path(path)

    def load(self) -> Optional[List[Course]]:
        if not self.path.exists():
            logger.info("No local store at %s. Starting fresh.", self.path)
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e
        return courses_from_payload(data)

    def save(self, courses) -> None:
        payload = courses_to_payload(courses)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e
        logger.debug("Saved %d courses to %s", len(payload["courses"]), self.path)
