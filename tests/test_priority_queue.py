import random

import pytest

from algokit.priority_queue import PriorityQueue


def test_dequeues_in_ascending_priority():
    rng = random.Random(5)
    pq = PriorityQueue()
    priorities = [rng.randrange(1000) for _ in range(20)]
    for value, priority in enumerate(priorities):
        pq.queue(value, priority)
    assert len(pq) == 20
    seen = []
    while not pq.is_empty():
        value, priority = pq.top()
        assert priorities[value] == priority
        seen.append(priority)
        pq.dequeue()
    assert seen == sorted(priorities)
    assert len(pq) == 0


def test_equal_priority_newest_first():
    pq = PriorityQueue()
    pq.queue("a", 1)
    pq.queue("b", 1)
    pq.queue("c", 0)
    assert pq.top() == ("c", 0)
    pq.dequeue()
    assert pq.top() == ("b", 1)
    pq.dequeue()
    assert pq.top() == ("a", 1)


def test_top_of_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().top()


def test_dequeue_empty_is_noop():
    pq = PriorityQueue()
    pq.dequeue()
    assert len(pq) == 0
    assert pq.is_empty()


def test_higher_priority_goes_to_back():
    pq = PriorityQueue()
    pq.queue("low", 1)
    pq.queue("high", 9)
    assert pq.top() == ("low", 1)
    pq.dequeue()
    assert pq.top() == ("high", 9)