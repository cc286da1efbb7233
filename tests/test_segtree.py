import operator
import random

import pytest

from contestlib.segtree import LazySegTree, SegTree


def _zero():
    return 0


def test_segtree_sums_match_slices():
    rng = random.Random(3)
    values = [rng.randint(0, 9) for _ in range(13)]
    tree = SegTree(operator.add, _zero, values)
    for _ in range(200):
        p = rng.randrange(len(values))
        x = rng.randint(0, 9)
        tree.set(p, x)
        values[p] = x
        assert tree.get(p) == x
        l, r = sorted(rng.sample(range(len(values) + 1), 2))
        assert tree.prod(l, r) == sum(values[l:r])
    assert tree.all_prod() == sum(values)


def test_segtree_from_length_uses_identity():
    tree = SegTree(max, lambda: -1, 6)
    assert [tree.get(i) for i in range(6)] == [-1] * 6
    assert tree.prod(2, 2) == -1


def test_segtree_binary_searches():
    rng = random.Random(11)
    values = [rng.randint(0, 5) for _ in range(20)]
    tree = SegTree(operator.add, _zero, values)
    n = len(values)
    for _ in range(100):
        k = rng.randint(0, 30)
        l = rng.randint(0, n)
        r = tree.max_right(l, lambda s: s <= k)
        assert l <= r <= n
        assert sum(values[l:r]) <= k
        assert r == n or sum(values[l:r + 1]) > k
        right = rng.randint(0, n)
        left = tree.min_left(right, lambda s: s <= k)
        assert 0 <= left <= right
        assert sum(values[left:right]) <= k
        assert left == 0 or sum(values[left - 1:right]) > k


def test_segtree_errors():
    tree = SegTree(operator.add, _zero, [1, 2, 3])
    with pytest.raises(IndexError):
        tree.prod(2, 1)
    with pytest.raises(IndexError):
        tree.get(3)
    with pytest.raises(ValueError):
        tree.max_right(0, lambda s: s < 0)


def _sum_tree(values):
    return LazySegTree(
        lambda x, y: (x[0] + y[0], x[1] + y[1]),
        lambda: (0, 0),
        lambda f, x: (x[0] + f * x[1], x[1]),
        lambda f, g: f + g,
        _zero,
        [(v, 1) for v in values],
    )


def test_lazy_range_add_sum_matches_naive():
    rng = random.Random(17)
    values = [rng.randint(0, 9) for _ in range(19)]
    tree = _sum_tree(values)
    n = len(values)
    for _ in range(300):
        kind = rng.randrange(3)
        if kind == 0:
            l, r = sorted(rng.sample(range(n + 1), 2))
            f = rng.randint(0, 4)
            tree.apply_range(l, r, f)
            for i in range(l, r):
                values[i] += f
        elif kind == 1:
            p = rng.randrange(n)
            f = rng.randint(0, 4)
            tree.apply(p, f)
            values[p] += f
        else:
            p = rng.randrange(n)
            x = rng.randint(0, 9)
            tree.set(p, (x, 1))
            values[p] = x
        l, r = sorted(rng.sample(range(n + 1), 2))
        assert tree.prod(l, r)[0] == sum(values[l:r])
        p = rng.randrange(n)
        assert tree.get(p)[0] == values[p]
    assert tree.all_prod() == (sum(values), n)


def test_lazy_binary_searches():
    rng = random.Random(23)
    values = [rng.randint(0, 5) for _ in range(16)]
    tree = _sum_tree(values)
    n = len(values)
    for _ in range(100):
        l, r = sorted(rng.sample(range(n + 1), 2))
        f = rng.randint(0, 3)
        tree.apply_range(l, r, f)
        for i in range(l, r):
            values[i] += f
        k = rng.randint(0, 60)
        start = rng.randint(0, n)
        end = tree.max_right(start, lambda s: s[0] <= k)
        assert sum(values[start:end]) <= k
        assert end == n or sum(values[start:end + 1]) > k
        stop = rng.randint(0, n)
        begin = tree.min_left(stop, lambda s: s[0] <= k)
        assert sum(values[begin:stop]) <= k
        assert begin == 0 or sum(values[begin - 1:stop]) > k


def test_lazy_range_chmax():
    rng = random.Random(29)
    n = 10
    tree = LazySegTree(max, _zero, max, max, _zero, n)
    heights = [0] * n
    for _ in range(50):
        l, r = sorted(rng.sample(range(n + 1), 2))
        if l == r:
            continue
        top = tree.prod(l, r)
        assert top == max(heights[l:r])
        tree.apply_range(l, r, top + 1)
        for i in range(l, r):
            heights[i] = max(heights[i], top + 1)
    assert [tree.get(i) for i in range(n)] == heights


def test_lazy_errors():
    tree = _sum_tree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.prod(2, 1)
    with pytest.raises(IndexError):
        tree.apply(3, 1)
    with pytest.raises(ValueError):
        tree.min_left(2, lambda s: s[0] < 0)