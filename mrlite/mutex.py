"""Mutual-exclusion locks, recursive by default, and a do-nothing stand-in."""

from __future__ import annotations

import threading

from mrlite.scoped_locker import ScopedLocker


class Mutex:
    """A lock; recursive (re-entrant by its owner) unless told otherwise."""

    def __init__(self, recursive=True):
        self._recursive = recursive
        self._lock = threading.RLock() if recursive else threading.Lock()

    @property
    def recursive(self):
        return self._recursive

    def lock(self):
        """Block until the lock is held."""
        self._lock.acquire()

    def try_lock(self):
        """Take the lock if it is free; return whether it was taken."""
        return self._lock.acquire(blocking=False)

    def unlock(self):
        """Release the lock; RuntimeError if it is not held."""
        try:
            self._lock.release()
        except RuntimeError as exc:
            raise RuntimeError(f"Mutex unlock error: {exc}") from exc

    def locker(self):
        """A context manager holding this mutex."""
        return ScopedLocker(self)

    def __enter__(self):
        self.lock()
        return self

    def __exit__(self, *args):
        self.unlock()


class NullMutex:
    """A placeholder with the mutex interface that never blocks."""

    def __init__(self):
        self._locked = False

    def lock(self):
        self._locked = True

    def try_lock(self):
        self._locked = True
        return True

    def unlock(self):
        self._locked = False

    def locked(self):
        return self._locked

    def locker(self):
        return ScopedLocker(self)

    def __enter__(self):
        self.lock()
        return self

    def __exit__(self, *args):
        self.unlock()