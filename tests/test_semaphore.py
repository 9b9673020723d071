import threading

import pytest

from newsroom.semaphore import BinarySemaphore, CountingSemaphore


@pytest.mark.parametrize("cls", [BinarySemaphore, CountingSemaphore])
def test_wait_decrements_value(cls):
    sem = cls(2)
    sem.wait()
    assert sem.value == 1
    sem.wait()
    assert sem.value == 0


@pytest.mark.parametrize("cls", [BinarySemaphore, CountingSemaphore])
def test_signal_increments_value(cls):
    sem = cls(0)
    sem.signal()
    sem.signal()
    assert sem.value == 2


@pytest.mark.parametrize("cls", [BinarySemaphore, CountingSemaphore])
def test_signal_then_wait_round_trip(cls):
    sem = cls(3)
    sem.signal()
    sem.wait()
    assert sem.value == 3


@pytest.mark.parametrize("cls", [BinarySemaphore, CountingSemaphore])
def test_wait_blocks_until_signal(cls):
    sem = cls(0)
    passed = threading.Event()

    def waiter():
        sem.wait()
        passed.set()

    thread = threading.Thread(target=waiter, daemon=True)
    thread.start()
    assert not passed.wait(0.1)
    sem.signal()
    assert passed.wait(2)
    thread.join(2)
    assert sem.value == 0


def test_each_signal_releases_one_waiter():
    sem = CountingSemaphore(0)
    released = []
    lock = threading.Lock()

    def waiter(n):
        sem.wait()
        with lock:
            released.append(n)

    threads = [threading.Thread(target=waiter, args=(n,), daemon=True) for n in range(3)]
    for thread in threads:
        thread.start()
    sem.signal()
    sem.signal()
    for thread in threads:
        thread.join(0.3)
    assert len(released) == 2
    assert sum(t.is_alive() for t in threads) == 1
    assert sem.value == 0
    sem.signal()
    for thread in threads:
        thread.join(2)
    assert sorted(released) == [0, 1, 2]
    assert sem.value == 0