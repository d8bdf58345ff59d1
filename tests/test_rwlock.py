import threading
import time

import pytest

from heap_ import from_list
from heapsort import sort
from rwlock import RWLock
from utils import greater, is_heap


def test_readers_share_the_lock():
    lock = RWLock()
    barrier = threading.Barrier(3, timeout=5)
    errors = []

    def reader():
        with lock.read_locked():
            try:
                barrier.wait()
            except threading.BrokenBarrierError as e:
                errors.append(e)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5)
    assert errors == []


def test_writer_waits_for_reader():
    lock = RWLock()
    events = []
    lock.acquire_read()

    def writer():
        with lock.write_locked():
            events.append("write")

    thread = threading.Thread(target=writer)
    thread.start()
    thread.join(0.1)
    assert events == []

    events.append("read done")
    lock.release_read()
    thread.join(5)
    assert events == ["read done", "write"]


def test_unbalanced_release():
    lock = RWLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_concurrent_push_and_pop():
    lock = RWLock()
    heap = from_list(lock, [], greater)
    n_threads, n_items = 4, 250

    def producer(offset):
        for i in range(n_items):
            heap.push(offset * n_items + i)

    threads = [threading.Thread(target=producer, args=(t,)) for t in range(n_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert heap.size() == n_threads * n_items
    assert is_heap(heap.data, heap.size(), greater)

    popped = []
    popped_lock = threading.Lock()

    def consumer():
        for _ in range(n_items):
            value = heap.pop()
            with popped_lock:
                popped.append(value)

    threads = [threading.Thread(target=consumer) for _ in range(n_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert heap.size() == 0
    assert sorted(popped) == list(range(n_threads * n_items))


def test_sort_excludes_readers_of_shared_list():
    lock = RWLock()
    data = list(range(2000, 0, -1))
    snapshots = []

    def reader():
        for _ in range(20):
            with lock.read_locked():
                snapshots.append(list(data))

    thread = threading.Thread(target=reader)
    thread.start()
    sort(lock, data, greater)
    thread.join()

    # Readers only ever see the list before or after the sort.
    for snapshot in snapshots:
        assert snapshot in (list(range(2000, 0, -1)), list(range(1, 2001)))


def test_interrupted_writer_wakes_blocked_readers():
    lock = RWLock()
    original_wait = lock._cond.wait
    errors = []
    reader_in = threading.Event()

    def wait(timeout=None):
        if threading.current_thread().name == "writer":
            original_wait(0.2)
            raise RuntimeError("interrupted")
        return original_wait(timeout)

    lock._cond.wait = wait

    def writer():
        try:
            lock.acquire_write()
        except RuntimeError as e:
            errors.append(e)

    def reader():
        with lock.read_locked():
            reader_in.set()

    lock.acquire_read()
    writer_thread = threading.Thread(target=writer, name="writer")
    writer_thread.start()
    time.sleep(0.05)
    reader_thread = threading.Thread(target=reader)
    reader_thread.start()

    # The first reader still holds the lock; only the writer giving up may wake the second.
    assert reader_in.wait(5)
    lock.release_read()
    writer_thread.join(5)
    reader_thread.join(5)
    assert len(errors) == 1
    assert lock._waiting_writers == 0
