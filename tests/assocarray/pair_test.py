from assocarray.interfaces import IPrintable
from assocarray.pair import KVPair


def test_pair_interface_membership():
    assert isinstance(KVPair("a", 1), IPrintable)


def test_pair_fields():
    p = KVPair("a", 1)
    assert "a" == p.key
    assert 1 == p.value


def test_pair_equals():
    assert KVPair("a", 1) == KVPair("a", 1)
    assert KVPair("a", 1) != KVPair("a", 2)
    assert KVPair("a", 1) != KVPair("b", 1)


def test_pair_value_is_mutable():
    p = KVPair("a", 1)
    p.value = 2
    assert 2 == p.value


def test_pair_copy():
    p = KVPair("a", [1])
    c = p.copy()
    assert p == c
    assert p is not c

    c.value = [2]
    assert [1] == p.value


def test_pair_repr():
    assert "a: 1" == str(KVPair("a", 1))
    assert "a: 1" == repr(KVPair("a", 1))
    assert "1: None" == str(KVPair(1, None))
