import pytest

from mrlite.scoped_locker import ScopedLocker, ScopedReaderLocker, ScopedWriterLocker


class _RecordingLock:
    def __init__(self):
        self.calls = []
        self.held = False
        self.reading = False
        self.writing = False

    def lock(self):
        self.calls.append("lock")
        self.held = True

    def unlock(self):
        self.calls.append("unlock")
        self.held = False

    def reader_lock(self):
        self.reading = True

    def reader_unlock(self):
        self.reading = False

    def writer_lock(self):
        self.writing = True

    def writer_unlock(self):
        self.writing = False


def test_scoped_locker_holds_lock_inside_block():
    lock = _RecordingLock()
    with ScopedLocker(lock):
        assert lock.held is True
    assert lock.held is False
    assert lock.calls == ["lock", "unlock"]


def test_scoped_locker_releases_on_exception():
    lock = _RecordingLock()
    with pytest.raises(KeyError):
        with ScopedLocker(lock):
            raise KeyError("boom")
    assert lock.held is False


def test_scoped_locker_does_not_lock_before_entering():
    lock = _RecordingLock()
    ScopedLocker(lock)
    assert lock.calls == []


def test_scoped_locker_rejects_none():
    with pytest.raises(ValueError):
        ScopedLocker(None)


def test_reader_locker():
    lock = _RecordingLock()
    with ScopedReaderLocker(lock):
        assert lock.reading is True
        assert lock.writing is False
    assert lock.reading is False


def test_writer_locker():
    lock = _RecordingLock()
    with ScopedWriterLocker(lock):
        assert lock.writing is True
        assert lock.reading is False
    assert lock.writing is False


def test_writer_locker_releases_on_exception():
    lock = _RecordingLock()
    with pytest.raises(RuntimeError):
        with ScopedWriterLocker(lock):
            raise RuntimeError("fail")
    assert lock.writing is False


def test_reader_and_writer_reject_none():
    with pytest.raises(ValueError):
        ScopedReaderLocker(None)
    with pytest.raises(ValueError):
        ScopedWriterLocker(None)