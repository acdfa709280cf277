import random

import pytest

from algokit.heap import Heap, HeapItem


def _drain(heap):
    out = []
    while not heap.is_empty():
        out.append(heap.pop())
    return out


def test_pop_returns_keys_in_ascending_order():
    rng = random.Random(1)
    heap = Heap(50)
    keys = [rng.randrange(1000) for _ in range(50)]
    for index, key in enumerate(keys):
        heap.push(key, index)
    assert len(heap) == 50
    popped = _drain(heap)
    assert [item.key for item in popped] == sorted(keys)
    assert sorted(item.data for item in popped) == list(range(50))


def test_pop_returns_heap_item():
    heap = Heap(4)
    heap.push(9, "x")
    assert heap.pop() == HeapItem(9, "x")
    assert heap.is_empty()


def test_push_on_full_heap_is_ignored():
    heap = Heap(2)
    heap.push(3, "a")
    heap.push(1, "b")
    heap.push(0, "c")
    assert len(heap) == 2
    assert "c" not in heap
    assert heap.pop().data == "b"


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Heap(3).pop()


def test_contains_and_remove():
    heap = Heap(10)
    for key, data in [(5, "a"), (2, "b"), (8, "c"), (1, "d")]:
        heap.push(key, data)
    assert "c" in heap
    assert heap.remove("c") is True
    assert "c" not in heap
    assert heap.remove("c") is False
    assert [item.data for item in _drain(heap)] == ["d", "b", "a"]


def test_remove_keeps_heap_order():
    rng = random.Random(3)
    heap = Heap(100)
    keys = {data: rng.randrange(500) for data in range(100)}
    for data, key in keys.items():
        heap.push(key, data)
    removed = rng.sample(range(100), 30)
    for data in removed:
        assert heap.remove(data)
    popped = _drain(heap)
    assert [item.key for item in popped] == sorted(
        key for data, key in keys.items() if data not in removed
    )
    assert not set(item.data for item in popped) & set(removed)


def test_decrease_key_moves_item_to_front():
    heap = Heap(5)
    heap.push(5, "a")
    heap.push(3, "b")
    heap.decrease_key("a", 1)
    assert heap.pop() == HeapItem(1, "a")
    heap.decrease_key("missing", 0)
    assert len(heap) == 1


def test_clear():
    heap = Heap(5)
    heap.push(1, "a")
    heap.push(2, "b")
    heap.clear()
    assert len(heap) == 0
    assert heap.is_empty()
    assert "a" not in heap


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Heap(-1)