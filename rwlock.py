import threading
from contextlib import contextmanager


class RWLock:
    """
    Reader/writer lock shared by every structure touching the same list.

    Many readers may hold it at once, a writer holds it alone. Waiting
    writers block new readers. The lock is not re-entrant.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._waiting_writers > 0:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read called without a matching acquire_read")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._waiting_writers += 1
            acquired = False
            try:
                while self._writer or self._readers > 0:
                    self._cond.wait()
                acquired = True
            finally:
                self._waiting_writers -= 1
                if not acquired:
                    # Readers held back by this writer must recheck.
                    self._cond.notify_all()
            self._writer = True

    def release_write(self):
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write called without a matching acquire_write")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        self.acquire_read()
        try:
            yield self
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        self.acquire_write()
        try:
            yield self
        finally:
            self.release_write()
