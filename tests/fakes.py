# tests/fakes.py
from gradcredits.data import CourseStore, StoreError


class FakeTimer:
    """Stands in for threading.Timer; fires only when the test says so."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function(*self.args, **self.kwargs)


class MemoryStore(CourseStore):
    def __init__(self, courses=None, fail_load=False, fail_save=False):
        self.courses = courses
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.saved = []

    def load(self):
        if self.fail_load:
            raise StoreError("network down")
        return None if self.courses is None else list(self.courses)

    def save(self, courses):
        if self.fail_save:
            raise StoreError("HTTP 500")
        self.saved.append(list(courses))
