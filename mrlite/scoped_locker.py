"""Context managers that hold a lock for the extent of a ``with`` block.

``ScopedLocker`` works with any object offering ``lock``/``unlock``;
the reader and writer variants use ``reader_lock``/``reader_unlock`` and
``writer_lock``/``writer_unlock`` respectively.
"""

from __future__ import annotations


class ScopedLocker:
    """Holds ``lock`` (via ``lock()``/``unlock()``) inside a ``with`` block."""

    def __init__(self, lock):
        if lock is None:
            raise ValueError("lock must not be None")
        self._lock = lock

    def __enter__(self):
        self._lock.lock()
        return self

    def __exit__(self, *args):
        self._lock.unlock()


class ScopedReaderLocker:
    """Holds the read side of a reader-writer lock inside a ``with`` block."""

    def __init__(self, lock):
        if lock is None:
            raise ValueError("lock must not be None")
        self._lock = lock

    def __enter__(self):
        self._lock.reader_lock()
        return self

    def __exit__(self, *args):
        self._lock.reader_unlock()


class ScopedWriterLocker:
    """Holds the write side of a reader-writer lock inside a ``with`` block."""

    def __init__(self, lock):
        if lock is None:
            raise ValueError("lock must not be None")
        self._lock = lock

    def __enter__(self):
        self._lock.writer_lock()
        return self

    def __exit__(self, *args):
        self._lock.writer_unlock()