"""
Data loading, saving and import.

This package handles all I/O: the course store, the debounced saver and
transcript import.
"""

from .store import (
    CourseStore,
    PantryStore,
    JsonFileStore,
    StoreError,
    create_retry_session,
)
from .sync import DebouncedSaver, SyncStatus
from .importer import (
    ImportCandidate,
    TranscriptImporter,
    TranscriptImportError,
    map_grade,
    normalize_semester,
)

__all__ = [
    "CourseStore",
    "PantryStore",
    "JsonFileStore",
    "StoreError",
    "create_retry_session",
    "DebouncedSaver",
    "SyncStatus",
    "ImportCandidate",
    "TranscriptImporter",
    "TranscriptImportError",
    "map_grade",
    "normalize_semester",
]
