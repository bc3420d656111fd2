from longmap import Chain


def keys_of(chain):
    return [e.key for e in chain.entries()]


def test_append_keeps_arrival_order():
    c = Chain()
    for k in (3, 1, 2):
        assert c.append_or_replace(k, str(k)) == (True, None)
    assert keys_of(c) == [3, 1, 2]
    assert len(c) == 3


def test_replace_in_place():
    c = Chain()
    c.append_or_replace(1, "a")
    c.append_or_replace(2, "b")
    assert c.append_or_replace(1, "z") == (False, "a")
    assert keys_of(c) == [1, 2]
    assert c.find(1).value == "z"
    assert len(c) == 2


def test_find_missing():
    c = Chain()
    assert c.find(1) is None
    c.append(1, "a")
    assert c.find(2) is None


def test_unlink_head_middle_tail():
    c = Chain()
    for k in range(5):
        c.append(k, k)

    assert c.unlink(0).key == 0
    assert keys_of(c) == [1, 2, 3, 4]

    assert c.unlink(2).key == 2
    assert keys_of(c) == [1, 3, 4]

    assert c.unlink(4).key == 4
    assert keys_of(c) == [1, 3]
    assert c.tail.key == 3

    c.append(9, 9)
    assert keys_of(c) == [1, 3, 9]
    assert len(c) == 3


def test_unlink_missing_leaves_chain_intact():
    c = Chain()
    c.append(1, "a")
    c.append(2, "b")
    assert c.unlink(7) is None
    assert keys_of(c) == [1, 2]


def test_unlink_last_entry_empties_chain():
    c = Chain()
    c.append(1, "a")
    assert c.unlink(1).value == "a"
    assert not c
    assert c.head is None and c.tail is None
    c.append(2, "b")
    assert keys_of(c) == [2]
