"""
Debounced saving.

Every edit to the course list asks for a save, but only the last request in
a burst of edits actually reaches the store.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from ..config import SAVE_DEBOUNCE_SECONDS
from .store import StoreError

logger = logging.getLogger(__name__)


class SyncStatus(Enum):
    """State of the most recent save request, for the status indicator."""
    IDLE = "idle"
    SAVING = "saving"
    SYNCED = "synced"
    ERROR = "error"


class DebouncedSaver:
    """
    Coalesces rapid save requests into one call after a quiet period.

    HOW IT WORKS:
    -------------
    Each schedule() call cancels the pending timer and starts a new one with
    a fresh token. When a timer fires it compares its token with the latest
    one; a superseded timer does nothing. The snapshot saved is always the
    one passed to the most recent schedule() call (last write wins).

    A failed save only changes the status to ERROR. The in-memory list is
    untouched, and the next schedule() tries again.

    Usage:
        saver = DebouncedSaver(store.save, delay=1.0)
        saver.schedule(courses)   # after every edit
        saver.flush()             # before exiting
    """

    def __init__(self, save: Callable[[list], None], delay: float = SAVE_DEBOUNCE_SECONDS,
                 timer_factory=threading.Timer):
        self._save = save
        self.delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._token = 0
        self._pending: Optional[list] = None
        self.status = SyncStatus.IDLE
        self.last_error: Optional[str] = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def schedule(self, snapshot) -> None:
        """Replace any pending save with one for this snapshot."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._token += 1
            token = self._token
            self._pending = list(snapshot)
            self.status = SyncStatus.SAVING
            timer = self._timer_factory(self.delay, self._fire, args=(token,))
            timer.daemon = True
            self._timer = timer
        timer.start()

    def flush(self) -> SyncStatus:
        """Save the pending snapshot right away, if there is one."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            snapshot = self._pending
            self._pending = None
            token = self._token
        if snapshot is not None:
            self._run(snapshot, token)
        return self.status

    def cancel(self) -> None:
        """Drop the pending snapshot without saving it."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._pending = None
            self._token += 1
            if self.status is SyncStatus.SAVING:
                self.status = SyncStatus.IDLE

    def _fire(self, token: int) -> None:
        with self._lock:
            if token != self._token or self._pending is None:
                return
            snapshot = self._pending
            self._pending = None
            self._timer = None
        self._run(snapshot, token)

    def _run(self, snapshot: list, token: int) -> None:
        try:
            self._save(snapshot)
        except StoreError as e:
            logger.error("Save failed: %s", e)
            with self._lock:
                self.last_error = str(e)
                if token == self._token:
                    self.status = SyncStatus.ERROR
            return
        except Exception as e:
            logger.exception("Unexpected error while saving")
            with self._lock:
                self.last_error = str(e)
                if token == self._token:
                    self.status = SyncStatus.ERROR
            return
        with self._lock:
            self.last_error = None
            # A newer edit arrived while this save was in flight
            if token == self._token:
                self.status = SyncStatus.SYNCED
