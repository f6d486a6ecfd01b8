import threading
import time

from vecindex.blocking_queue import BlockingQueue


def test_fifo_order():
    q = BlockingQueue(8)
    for item in ["a", "b", "c"]:
        q.put(item)
    assert [q.take(), q.take(), q.take()] == ["a", "b", "c"]
    assert q.empty()


def test_front_and_back_do_not_remove():
    q = BlockingQueue(8)
    q.put(1)
    q.put(2)
    q.put(3)
    assert q.front() == 1
    assert q.back() == 3
    assert len(q) == 3


def test_len_and_empty_track_contents():
    q = BlockingQueue(4)
    assert q.empty() and len(q) == 0
    q.put("x")
    assert not q.empty() and len(q) == 1
    q.take()
    assert q.empty()


def test_default_capacity_is_32():
    assert BlockingQueue().capacity == 32


def test_non_positive_capacity_is_ignored():
    q = BlockingQueue(5)
    q.set_capacity(0)
    assert q.capacity == 5
    q.set_capacity(-3)
    assert q.capacity == 5
    q.set_capacity(2)
    assert q.capacity == 2
    assert BlockingQueue(0).capacity == 32


def test_put_blocks_while_full():
    q = BlockingQueue(1)
    q.put("first")
    writer = threading.Thread(target=q.put, args=("second",))
    writer.start()
    time.sleep(0.1)
    assert writer.is_alive()
    assert len(q) == 1
    assert q.take() == "first"
    writer.join(5)
    assert not writer.is_alive()
    assert q.take() == "second"


def test_take_blocks_until_put():
    q = BlockingQueue(2)
    result = []
    reader = threading.Thread(target=lambda: result.append(q.take()))
    reader.start()
    time.sleep(0.1)
    assert reader.is_alive()
    q.put(42)
    reader.join(5)
    assert result == [42]


def test_raising_capacity_releases_writer():
    q = BlockingQueue(1)
    q.put(1)
    writer = threading.Thread(target=q.put, args=(2,))
    writer.start()
    time.sleep(0.1)
    assert writer.is_alive()
    q.set_capacity(3)
    writer.join(5)
    assert not writer.is_alive()
    assert q.back() == 2


def test_many_producers_and_consumers_preserve_items():
    q = BlockingQueue(3)
    produced = list(range(100))
    consumed = []
    lock = threading.Lock()

    def consume(n):
        for _ in range(n):
            item = q.take()
            with lock:
                consumed.append(item)

    consumers = [threading.Thread(target=consume, args=(25,)) for _ in range(4)]
    for t in consumers:
        t.start()
    for item in produced:
        q.put(item)
    for t in consumers:
        t.join(5)
    assert sorted(consumed) == produced
    assert q.empty()