"""Sequence helpers: longest increasing subsequences and Cartesian trees."""

from __future__ import annotations

import bisect
import math
from typing import Sequence


def lis(a: Sequence[int]) -> list[int]:
    """Length of the longest strictly increasing subsequence ending at each index."""
    n = len(a)
    best = [-1] + [math.inf] * n
    result = []
    for i, x in enumerate(a):
        length = bisect.bisect_left(best, x, 1, i + 1)
        result.append(length)
        best[length] = min(best[length], x)
    return result


def cartesian_tree(a: Sequence) -> tuple[list[list[int]], int | None]:
    """Min-rooted Cartesian tree as child lists and the root index.

    Equal values place the later one below the earlier; an empty input has
    no root.
    """
    n = len(a)
    parent: list[int | None] = [None] * n
    stack: list[int] = []
    for i, x in enumerate(a):
        popped = None
        while stack and x < a[stack[-1]]:
            popped = stack.pop()
        if popped is not None:
            parent[popped] = i
        if stack:
            parent[i] = stack[-1]
        stack.append(i)
    children: list[list[int]] = [[] for _ in range(n)]
    root = None
    for i, p in enumerate(parent):
        if p is None:
            root = i
        else:
            children[p].append(i)
    return children, root