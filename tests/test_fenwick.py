import random

import pytest

from contestlib.fenwick import FenwickTree


def test_matches_list_sums():
    rng = random.Random(1)
    n = 37
    tree = FenwickTree(n)
    values = [0] * n
    for _ in range(300):
        i = rng.randrange(n)
        x = rng.randint(-50, 50)
        tree.add(i, x)
        values[i] += x
        a, b = sorted(rng.sample(range(n + 1), 2))
        assert tree.range_sum(a, b) == sum(values[a:b])
        assert tree.prefix_sum(b) == sum(values[:b])


def test_empty_ranges():
    tree = FenwickTree(5)
    tree.add(2, 7)
    assert tree.prefix_sum(0) == 0
    assert tree.range_sum(3, 3) == 0
    assert len(tree) == 5


def test_bounds():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.add(4, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(5)
    with pytest.raises(ValueError):
        FenwickTree(-1)