import pytest

from algokit.dictionary import Dictionary, KeyValuePair, get_next_prime


class _Collider:
    """Distinct keys that all share one hash value."""

    def __init__(self, name):
        self.name = name

    def __hash__(self):
        return 42

    def __eq__(self, other):
        return isinstance(other, _Collider) and other.name == self.name


def _is_prime(n):
    return n > 1 and all(n % d for d in range(2, int(n ** 0.5) + 1))


@pytest.mark.parametrize("n, expected", [(0, 3), (3, 3), (4, 7), (7199369, 7199369)])
def test_get_next_prime_from_table(n, expected):
    assert get_next_prime(n) == expected


def test_get_next_prime_beyond_table():
    n = 7199370
    p = get_next_prime(n)
    assert p >= n
    assert _is_prime(p)
    assert (p - 1) % 101 != 0


def test_get_next_prime_negative_raises():
    with pytest.raises(ValueError):
        get_next_prime(-1)


def test_set_and_get():
    d = Dictionary()
    d["a"] = 1
    d["b"] = 2
    assert d["a"] == 1
    assert d["b"] == 2
    assert len(d) == 2


def test_setitem_updates_existing():
    d = Dictionary()
    d["a"] = 1
    d["a"] = 5
    assert d["a"] == 5
    assert len(d) == 1


def test_missing_key_raises_keyerror():
    d = Dictionary()
    d["a"] = 1
    with pytest.raises(KeyError):
        d["nope"]
    assert "nope" not in d
    assert d["a"] == 1
    assert len(d) == 1


def test_add_refuses_duplicate():
    d = Dictionary()
    assert d.add("k", 1) is True
    assert d.add("k", 2) is False
    assert d["k"] == 1


def test_get_with_default():
    d = Dictionary()
    d.add("x", 10)
    assert d.get("x") == 10
    assert d.get("y") is None
    assert d.get("y", -1) == -1


def test_contains_and_contains_pair():
    d = Dictionary()
    d["k"] = "v"
    assert "k" in d
    assert "z" not in d
    assert d.contains_pair("k", "v")
    assert not d.contains_pair("k", "w")
    assert not d.contains_pair("z", "v")


def test_remove():
    d = Dictionary()
    d["a"] = 1
    assert d.remove("a") is True
    assert d.remove("a") is False
    assert "a" not in d
    assert len(d) == 0


def test_iteration_follows_slot_order_and_reuses_freed_slot():
    d = Dictionary()
    for key, value in [(1, "one"), (2, "two"), (3, "three")]:
        d[key] = value
    assert [pair.key for pair in d] == [1, 2, 3]
    d.remove(2)
    d[4] = "four"
    assert list(d) == [
        KeyValuePair(1, "one"),
        KeyValuePair(4, "four"),
        KeyValuePair(3, "three"),
    ]


def test_grows_past_initial_capacity():
    d = Dictionary()
    for i in range(500):
        assert d.add(i, i * i)
    assert len(d) == 500
    assert all(d[i] == i * i for i in range(500))
    assert sorted(pair.key for pair in d) == list(range(500))


def test_colliding_keys_chain_and_remove():
    d = Dictionary(capacity=5)
    keys = [_Collider(name) for name in "abcde"]
    for index, key in enumerate(keys):
        d[key] = index
    assert all(d[key] == index for index, key in enumerate(keys))
    assert d.remove(keys[2])
    assert keys[2] not in d
    assert [d[k] for k in keys if k is not keys[2]] == [0, 1, 3, 4]


def test_clear_empties_and_allows_reuse():
    d = Dictionary()
    for i in range(20):
        d[i] = i
    d.clear()
    assert len(d) == 0
    assert list(d) == []
    assert 5 not in d
    d["again"] = True
    assert d["again"] is True
    assert len(d) == 1