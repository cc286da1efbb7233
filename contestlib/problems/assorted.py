"""Assorted problems: enumeration, geometry, queries and small scans."""

from __future__ import annotations

import bisect
import math
from collections import deque
from itertools import product
from typing import Iterable, Sequence


def balanced_parentheses(n: int) -> list[str]:
    """All balanced parenthesis strings of length ``n`` in lexicographic order."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = []
    for chars in product("()", repeat=n):
        balance = 0
        for ch in chars:
            balance += 1 if ch == "(" else -1
            if balance < 0:
                break
        else:
            if balance == 0:
                result.append("".join(chars))
    return result


def _angle_between(a: float, b: float) -> float:
    diff = abs(a - b)
    return 360 - diff if diff >= 180 else diff


def max_angle(points: Sequence[tuple[int, int]]) -> float:
    """Largest angle in degrees at a vertex formed with two other points."""
    best = 0.0
    for i, (xi, yi) in enumerate(points):
        degrees = sorted(
            math.degrees(math.atan2(y - yi, x - xi)) % 360
            for j, (x, y) in enumerate(points)
            if j != i
        )
        m = len(degrees)
        for d in degrees:
            target = d + 180
            if target >= 360:
                target -= 360
            j = bisect.bisect_left(degrees, target)
            k = (j - 1) % m
            if j == m:
                j = 0
            best = max(
                best,
                _angle_between(d, degrees[j]),
                _angle_between(d, degrees[k]),
            )
    return best


def min_travel_distance(a: Iterable[int], b: Iterable[int]) -> int:
    """Least total distance matching the points of ``a`` with those of ``b``."""
    a, b = sorted(a), sorted(b)
    if len(a) != len(b):
        raise ValueError("both lists must have the same length")
    return sum(abs(x - y) for x, y in zip(a, b))


def ferris_wheel_angles(
    t: int, length: int, x: int, y: int, times: Iterable[int]
) -> list[float]:
    """Elevation angle in degrees from a wheel cabin down to a statue at each time.

    The wheel of diameter ``length`` turns once in ``t`` and starts at its bottom.
    """
    if t <= 0:
        raise ValueError("period must be positive")
    angles = []
    for e in times:
        theta = math.radians(270 - e / t * 360)
        p = math.cos(theta) * length / 2
        q = math.sin(theta) * length / 2 + length / 2
        dist = math.sqrt(x * x + (p - y) ** 2 + q * q)
        angles.append(math.degrees(math.asin(q / dist)))
    return angles


def can_reach_exact(a: Sequence[int], b: Sequence[int], k: int) -> bool:
    """Whether exactly ``k`` unit steps on the entries of ``a`` can turn it into ``b``."""
    if len(a) != len(b):
        raise ValueError("both lists must have the same length")
    gap = sum(abs(x - y) for x, y in zip(a, b))
    return gap <= k and (k - gap) % 2 == 0


def first_registrations(names: Iterable[str]) -> list[int]:
    """Indices at which each name appears for the first time."""
    seen: set[str] = set()
    result = []
    for i, name in enumerate(names):
        if name not in seen:
            seen.add(name)
            result.append(i)
    return result


def manhattan_farthest(
    points: Sequence[tuple[int, int]], queries: Iterable[int]
) -> list[int]:
    """Largest Manhattan distance from each queried point to any point."""
    if not points:
        raise ValueError("at least one point is required")
    us = [x - y for x, y in points]
    vs = [x + y for x, y in points]
    lo_u, hi_u, lo_v, hi_v = min(us), max(us), min(vs), max(vs)
    return [
        max(hi_u - us[i], us[i] - lo_u, hi_v - vs[i], vs[i] - lo_v) for i in queries
    ]


def shift_and_swap(
    a: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Run ``(1, x, y)`` swaps, ``(2, _, _)`` right rotations and ``(3, x, _)``
    reads on a copy of ``a``; returns the values read."""
    values = list(a)
    n = len(values)
    offset = 0
    reads = []
    for t, x, y in queries:
        if t == 1:
            i, j = (x + offset) % n, (y + offset) % n
            values[i], values[j] = values[j], values[i]
        elif t == 2:
            offset = (offset + n - 1) % n
        elif t == 3:
            reads.append(values[(x + offset) % n])
        else:
            raise ValueError(f"unknown query type {t}")
    return reads


def max_partial_scores(k: int, scores: Iterable[tuple[int, int]]) -> int:
    """Best total of ``k`` score units, where a task ``(a, b)`` gives ``b`` for
    partial credit and ``a - b`` more for full credit."""
    parts = []
    for a, b in scores:
        parts += [b, a - b]
    if not 0 <= k <= len(parts):
        raise ValueError("k is out of range")
    parts.sort(reverse=True)
    return sum(parts[:k])


def reachability(
    n: int, edges: Iterable[tuple[int, int]], queries: Sequence[tuple[int, int]]
) -> list[bool]:
    """Whether ``a`` reaches ``b`` for each query; edges point from a smaller to a
    larger vertex."""
    reach = [0] * n
    for i, (a, _) in enumerate(queries):
        reach[a] |= 1 << i
    for a, b in sorted(edges):
        reach[b] |= reach[a]
    return [bool(reach[b] >> i & 1) for i, (_, b) in enumerate(queries)]


def deck_queries(queries: Iterable[tuple[int, int]]) -> list[int]:
    """Run ``(1, x)`` put-on-top, ``(2, x)`` put-at-bottom and ``(3, i)`` read-at-
    index queries on a deck; returns the values read."""
    deck: deque[int] = deque()
    reads = []
    for t, x in queries:
        if t == 1:
            deck.appendleft(x)
        elif t == 2:
            deck.append(x)
        elif t == 3:
            reads.append(deck[x])
        else:
            raise ValueError(f"unknown query type {t}")
    return reads


def expected_inversions(ranges: Sequence[tuple[int, int]]) -> float:
    """Expected inversions when value ``i`` is drawn uniformly from ``ranges[i]``."""
    total = 0.0
    for i, (li, ri) in enumerate(ranges):
        for lj, rj in ranges[i + 1:]:
            count = 0
            for v in range(li, ri + 1):
                if lj < v:
                    count += min(rj, v - 1) - lj + 1
            total += count / (ri - li + 1) / (rj - lj + 1)
    return total


def _spread(values: list[int]) -> int:
    values.sort()
    median = values[len(values) // 2]
    return sum(abs(v - median) for v in values)


def min_gathering_distance(points: Sequence[tuple[int, int]]) -> int:
    """Least total Manhattan distance for all points to meet at one spot."""
    if not points:
        return 0
    return _spread([x for x, _ in points]) + _spread([y for _, y in points])


def count_single_lower_neighbour(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of vertices with exactly one neighbour of smaller index."""
    lower = [0] * n
    for a, b in edges:
        if a < b:
            lower[b] += 1
        elif b < a:
            lower[a] += 1
    return sum(1 for c in lower if c == 1)