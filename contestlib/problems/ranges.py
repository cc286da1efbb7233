"""Range problems: segment trees, Fenwick trees, prefix sums and disjoint sets."""

from __future__ import annotations

import bisect
from collections import Counter
from itertools import accumulate
from typing import Iterable, Sequence

from contestlib.fenwick import FenwickTree
from contestlib.segtree import LazySegTree
from contestlib.unionfind import UnionFind

_VALUE_LIMIT = 5000
_NEIGHBOURS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def stack_bricks(w: int, bricks: Iterable[tuple[int, int]]) -> list[int]:
    """Top height of each brick dropped on the half-open columns ``[l, r)``."""
    tree = LazySegTree(max, lambda: 0, max, max, lambda: 0, w)
    heights = []
    for l, r in bricks:
        top = tree.prod(l, r) + 1
        tree.apply_range(l, r, top)
        heights.append(top)
    return heights


def count_crossing_chords(n: int, chords: Iterable[tuple[int, int]]) -> int:
    """Pairs of distinct chords ``(l, r)``, ``0 <= l < r < n``, that cross strictly."""
    chords = list(chords)
    for l, r in chords:
        if not 0 <= l < r < n:
            raise ValueError(f"chord ({l}, {r}) is not inside 0..{n - 1}")
    m = len(chords)
    freq = Counter(p for chord in chords for p in chord)
    total = m * (m - 1) // 2 - sum(f * (f - 1) // 2 for f in freq.values())
    order = sorted(chords)
    tree = FenwickTree(n)
    for l, r in order:
        total -= tree.prefix_sum(l)
        tree.add(r, 1)
    tree = FenwickTree(n)
    pending: list[int] = []
    current = None
    for l, r in order:
        if l != current:
            for v in pending:
                tree.add(v, 1)
            pending.clear()
            current = l
        pending.append(r)
        total -= tree.range_sum(r + 1, n)
    return total


def bumpiness_after_updates(
    a: Sequence[int], updates: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Sum of ``|a[i+1] - a[i]|`` after each addition of ``v`` to ``a[l:r]``."""
    n = len(a)
    diff = [y - x for x, y in zip(a, a[1:])]
    total = sum(abs(d) for d in diff)
    results = []
    for l, r, v in updates:
        if not 0 <= l <= r <= n:
            raise IndexError(f"range [{l}, {r}) out of range")
        if l > 0:
            total -= abs(diff[l - 1])
            diff[l - 1] += v
            total += abs(diff[l - 1])
        if r < n:
            total -= abs(diff[r - 1])
            diff[r - 1] -= v
            total += abs(diff[r - 1])
        results.append(total)
    return results


def infer_values(n: int, queries: Iterable[tuple[int, int, int, int]]) -> list:
    """Answer queries about hidden values ``A[0..n-1]``.

    ``(0, x, x+1, v)`` states ``A[x] + A[x+1] == v``; ``(1, x, y, v)`` asks for
    ``A[y]`` given ``A[x] == v``. Each ask yields the value or None when it is
    not determined.
    """
    uf = UnionFind(n)
    tree = FenwickTree(max(n - 1, 0))
    answers: list = []
    for t, x, y, v in queries:
        if t == 0:
            if y != x + 1:
                raise ValueError("a sum must link neighbouring positions")
            if uf.unite(x, y):
                tree.add(x, -v if x % 2 == 0 else v)
        elif t == 1:
            if not uf.same(x, y):
                answers.append(None)
                continue
            if x == y:
                answers.append(v)
            elif x < y:
                gap = tree.range_sum(x, y)
                if x % 2 == 0:
                    gap = -gap
                answers.append(v - gap if x % 2 == y % 2 else gap - v)
            else:
                gap = tree.range_sum(y, x)
                if y % 2 == 0:
                    gap = -gap
                answers.append(gap + v if x % 2 == y % 2 else gap - v)
        else:
            raise ValueError(f"unknown query type {t}")
    return answers


def class_score_sums(
    students: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Score totals of class 1 and class 2 among students ``[l, r)``."""
    students = list(students)
    for c, _ in students:
        if c not in (1, 2):
            raise ValueError(f"unknown class {c}")
    first = [0, *accumulate(p if c == 1 else 0 for c, p in students)]
    second = [0, *accumulate(p if c == 2 else 0 for c, p in students)]
    n = len(students)
    results = []
    for l, r in queries:
        if not 0 <= l <= r <= n:
            raise IndexError(f"range [{l}, {r}) out of range")
        results.append((first[r] - first[l], second[r] - second[l]))
    return results


def overlap_area_counts(rectangles: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """Area covered by exactly ``k`` rectangles, for ``k = 1 .. len(rectangles)``."""
    rects = list(rectangles)
    n = len(rects)
    xs = sorted({x for lx, _, rx, _ in rects for x in (lx, rx)})
    ys = sorted({y for _, ly, _, ry in rects for y in (ly, ry)})
    xi = {x: i for i, x in enumerate(xs)}
    yi = {y: j for j, y in enumerate(ys)}
    grid = [[0] * len(ys) for _ in xs]
    for lx, ly, rx, ry in rects:
        grid[xi[lx]][yi[ly]] += 1
        grid[xi[lx]][yi[ry]] -= 1
        grid[xi[rx]][yi[ly]] -= 1
        grid[xi[rx]][yi[ry]] += 1
    previous = [0] * len(ys)
    for row in grid:
        running = 0
        for j, value in enumerate(row):
            running += value
            row[j] = running + previous[j]
        previous = row
    areas = [0] * (n + 1)
    for i in range(len(xs) - 1):
        width = xs[i + 1] - xs[i]
        for j in range(len(ys) - 1):
            c = grid[i][j]
            if 0 < c <= n:
                areas[c] += width * (ys[j + 1] - ys[j])
    return areas[1:]


def max_students_in_range(k: int, students: Iterable[tuple[int, int]]) -> int:
    """Most students ``(height, weight)`` whose heights and weights each span at most ``k``.

    Heights and weights lie in 1..5000 and ``0 <= k < 5000``.
    """
    if not 0 <= k < _VALUE_LIMIT:
        raise ValueError(f"k must lie in 0..{_VALUE_LIMIT - 1}")
    points = sorted(students)
    for a, b in points:
        if not (1 <= a <= _VALUE_LIMIT and 1 <= b <= _VALUE_LIMIT):
            raise ValueError(f"student ({a}, {b}) is out of range")
    heights = [a for a, _ in points]
    best = 0
    for start in sorted(set(heights)):
        lo = bisect.bisect_left(heights, start)
        hi = bisect.bisect_right(heights, start + k)
        weights = sorted(b for _, b in points[lo:hi])
        j = 0
        for i, b in enumerate(weights):
            while weights[j] < b - k:
                j += 1
            best = max(best, i - j + 1)
    return best


def red_painting(h: int, w: int, queries: Iterable[Sequence[int]]) -> list[bool]:
    """Paint cells red and ask whether two cells are joined by red cells.

    ``(1, r, c)`` paints a cell; ``(2, ra, ca, rb, cb)`` asks about two cells.
    """
    uf = UnionFind(h * w)
    red = [[False] * w for _ in range(h)]

    def check(r: int, c: int) -> None:
        if not (0 <= r < h and 0 <= c < w):
            raise IndexError(f"cell ({r}, {c}) out of range")

    answers = []
    for query in queries:
        kind = query[0]
        if kind == 1:
            _, r, c = query
            check(r, c)
            if red[r][c]:
                continue
            red[r][c] = True
            for dr, dc in _NEIGHBOURS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < h and 0 <= nc < w and red[nr][nc]:
                    uf.unite(r * w + c, nr * w + nc)
        elif kind == 2:
            _, ra, ca, rb, cb = query
            check(ra, ca)
            check(rb, cb)
            answers.append(
                red[ra][ca] and red[rb][cb] and uf.same(ra * w + ca, rb * w + cb)
            )
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers