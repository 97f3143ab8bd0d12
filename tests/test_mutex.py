import threading

import pytest

from mrlite.mutex import Mutex, NullMutex


def _try_lock_elsewhere(mutex):
    result = []

    def attempt():
        taken = mutex.try_lock()
        if taken:
            mutex.unlock()
        result.append(taken)

    thread = threading.Thread(target=attempt)
    thread.start()
    thread.join(5)
    return result[0]


def test_lock_and_unlock():
    mutex = Mutex()
    mutex.lock()
    assert _try_lock_elsewhere(mutex) is False
    mutex.unlock()
    assert _try_lock_elsewhere(mutex) is True


def test_locker():
    mutex = Mutex()
    with mutex.locker():
        assert _try_lock_elsewhere(mutex) is False
    assert _try_lock_elsewhere(mutex) is True


def test_locker_with_exception():
    mutex = Mutex()
    with pytest.raises(ZeroDivisionError):
        with mutex.locker():
            raise ZeroDivisionError
    assert _try_lock_elsewhere(mutex) is True


def test_mutex_as_context_manager():
    mutex = Mutex()
    with mutex:
        assert _try_lock_elsewhere(mutex) is False
    assert _try_lock_elsewhere(mutex) is True


def test_recursive_mutex_reenters():
    mutex = Mutex()
    mutex.lock()
    assert mutex.try_lock() is True
    mutex.unlock()
    assert _try_lock_elsewhere(mutex) is False
    mutex.unlock()
    assert _try_lock_elsewhere(mutex) is True


def test_non_recursive_mutex_does_not_reenter():
    mutex = Mutex(recursive=False)
    assert mutex.recursive is False
    mutex.lock()
    assert mutex.try_lock() is False
    mutex.unlock()
    assert mutex.try_lock() is True
    mutex.unlock()


def test_unlock_unheld_raises():
    with pytest.raises(RuntimeError):
        Mutex(recursive=False).unlock()
    with pytest.raises(RuntimeError):
        Mutex().unlock()


def test_null_mutex_tracks_state():
    mutex = NullMutex()
    assert mutex.locked() is False
    mutex.lock()
    assert mutex.locked() is True
    mutex.unlock()
    assert mutex.locked() is False
    assert mutex.try_lock() is True
    assert mutex.try_lock() is True
    mutex.unlock()
    assert mutex.locked() is False


def test_null_mutex_locker_and_context():
    mutex = NullMutex()
    with mutex.locker():
        assert mutex.locked() is True
    assert mutex.locked() is False
    with mutex:
        assert mutex.locked() is True
    assert mutex.locked() is False