import pytest

from algokit.linked_list import LinkedList


def make(values):
    lst = LinkedList()
    nodes = [lst.push_back(v) for v in values]
    return lst, nodes


def test_push_back_keeps_insertion_order():
    lst, _ = make(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for v in [1, 2, 3]:
        lst.push_front(v)
    assert list(lst) == [3, 2, 1]


def test_reversed_iteration():
    lst, _ = make([1, 2, 3, 4])
    assert list(reversed(lst)) == [4, 3, 2, 1]


def test_empty_list():
    lst = LinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert list(lst) == []


def test_remove_returns_value_and_unlinks():
    lst, nodes = make([1, 2, 3])
    assert lst.remove(nodes[1]) == 2
    assert list(lst) == [1, 3]
    assert len(lst) == 2


def test_remove_foreign_node_raises():
    lst, _ = make([1])
    other, other_nodes = make([2])
    with pytest.raises(ValueError):
        lst.remove(other_nodes[0])


def test_remove_twice_raises():
    lst, nodes = make([1, 2])
    lst.remove(nodes[0])
    with pytest.raises(ValueError):
        lst.remove(nodes[0])


def test_remove_while_iterating():
    lst, nodes = make([1, 2, 3, 4])
    by_value = dict(zip([1, 2, 3, 4], nodes))
    seen = []
    for value in lst:
        seen.append(value)
        lst.remove(by_value[value])
    assert seen == [1, 2, 3, 4]
    assert lst.is_empty()


def test_move_to_front_within_list():
    lst, nodes = make([1, 2, 3])
    lst.move_to_front(nodes[2])
    assert list(lst) == [3, 1, 2]
    assert len(lst) == 3


def test_move_to_back_within_list():
    lst, nodes = make([1, 2, 3])
    lst.move_to_back(nodes[0])
    assert list(lst) == [2, 3, 1]


def test_move_between_lists_updates_lengths():
    a, a_nodes = make([1, 2])
    b, _ = make([3])
    b.move_to_back(a_nodes[0])
    assert list(a) == [2]
    assert list(b) == [3, 1]
    assert (len(a), len(b)) == (1, 2)
    assert b.remove(a_nodes[0]) == 1


def test_move_detached_node_raises():
    lst, nodes = make([1])
    lst.remove(nodes[0])
    with pytest.raises(ValueError):
        lst.move_to_front(nodes[0])


def test_splice_puts_other_in_front_and_empties_it():
    a, _ = make([4, 5])
    b, b_nodes = make([1, 2, 3])
    a.splice(b)
    assert list(a) == [1, 2, 3, 4, 5]
    assert list(reversed(a)) == [5, 4, 3, 2, 1]
    assert len(a) == 5
    assert b.is_empty() and len(b) == 0
    assert a.remove(b_nodes[1]) == 2


def test_splice_empty_other_is_noop():
    a, _ = make([1])
    a.splice(LinkedList())
    assert list(a) == [1]


def test_splice_self_raises():
    a, _ = make([1])
    with pytest.raises(ValueError):
        a.splice(a)