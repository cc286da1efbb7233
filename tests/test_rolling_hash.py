import pytest

from contestlib.rolling_hash import RollingHash


def test_equal_substrings_equal_hashes():
    text = "abracadabra"
    rh = RollingHash(text)
    for l in range(len(text) + 1):
        for r in range(l, len(text) + 1):
            for l2 in range(len(text) + 1 - (r - l)):
                r2 = l2 + (r - l)
                same = text[l:r] == text[l2:r2]
                assert (rh.get(l, r) == rh.get(l2, r2)) == same


def test_independent_objects_agree():
    a = RollingHash("hello world")
    b = RollingHash("world")
    assert a.get(6, 11) == b.get(0, 5)


def test_codes_hash_like_characters():
    text = "mississippi"
    assert RollingHash(text).get(0, len(text)) == RollingHash([ord(c) for c in text]).get(0, len(text))


def test_empty_slice():
    rh = RollingHash("xyz")
    assert rh.get(1, 1) == (0, 0)
    assert len(rh) == 3


def test_bounds():
    rh = RollingHash("abc")
    with pytest.raises(IndexError):
        rh.get(2, 1)
    with pytest.raises(IndexError):
        rh.get(0, 4)