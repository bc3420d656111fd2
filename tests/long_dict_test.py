import pytest

from longmap import LongDict, LongMap


def test_dict_like():
    d = LongDict({1: "a", 2: "b"})
    d[3] = "c"
    assert d[1] == "a"
    assert d.get(9) is None
    assert 2 in d
    assert len(d) == 3

    assert set(d.keys()) == {1, 2, 3}
    assert set(d.values()) == {"a", "b", "c"}
    assert set(d.items()) == {(1, "a"), (2, "b"), (3, "c")}
    assert d.to_py() == {1: "a", 2: "b", 3: "c"}
    assert d == {1: "a", 2: "b", 3: "c"}


def test_missing_key_raises():
    d = LongDict([(1, "a")])
    with pytest.raises(KeyError):
        d[2]
    with pytest.raises(KeyError):
        del d[2]
    with pytest.raises(KeyError):
        d.pop(2)
    assert d.pop(2, "dflt") == "dflt"


def test_stored_none_is_not_missing():
    d = LongDict()
    d[7] = None
    assert d[7] is None
    assert 7 in d
    assert d.pop(7) is None
    assert 7 not in d


def test_delete_and_clear():
    d = LongDict((i, i * i) for i in range(30))
    del d[4]
    assert 4 not in d
    assert len(d) == 29
    d.clear()
    assert len(d) == 0
    assert list(d) == []


def test_builds_from_long_map_and_passes_config():
    m = LongMap()
    m.put(100, "x")
    m.put(4, "y")
    d = LongDict(m, initial_capacity=2, load_factor=0.5)
    assert d == {100: "x", 4: "y"}
    assert d == LongDict({4: "y", 100: "x"})
