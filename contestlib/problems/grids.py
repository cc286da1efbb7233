"""Grid problems: cross sums, placements, turn-minimal paths and cycles."""

from __future__ import annotations

import math
from collections import Counter, deque
from itertools import combinations
from typing import Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def cross_sums(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """For each cell, the sum of its row and column counting the cell once."""
    rows = [sum(r) for r in grid]
    cols = [sum(c) for c in zip(*grid)]
    return [
        [rows[i] + cols[j] - x for j, x in enumerate(row)]
        for i, row in enumerate(grid)
    ]


def max_lights(h: int, w: int) -> int:
    """Lights placed greedily in row-major order so that no 2x2 block holds two."""
    if h < 0 or w < 0:
        raise ValueError("dimensions must be non-negative")
    lit = [[False] * w for _ in range(h)]
    count = 0
    for i in range(h):
        for j in range(w):
            blocked = False
            for di in (-1, 1):
                for dj in (-1, 1):
                    ni, nj = i + di, j + dj
                    if 0 <= ni < h and 0 <= nj < w:
                        if lit[ni][nj] or lit[ni][j] or lit[i][nj]:
                            blocked = True
            if not blocked:
                lit[i][j] = True
                count += 1
    return count


def min_turns(
    grid: Sequence[str], start: tuple[int, int], end: tuple[int, int]
) -> int | None:
    """Fewest turns on a path between two cells avoiding '#'; None if unreachable."""
    h = len(grid)
    w = len(grid[0]) if h else 0
    sr, sc = start
    er, ec = end
    for r, c in (start, end):
        if not (0 <= r < h and 0 <= c < w):
            raise IndexError(f"cell ({r}, {c}) out of range")
    inf = math.inf
    dist = [[[inf] * 4 for _ in range(w)] for _ in range(h)]
    queue: deque[tuple[int, int, int, int]] = deque()
    for d in range(4):
        dist[sr][sc][d] = 0
        queue.append((0, sr, sc, d))
    while queue:
        cost, r, c, d = queue.popleft()
        if cost > dist[r][c][d]:
            continue
        for nd, (dr, dc) in enumerate(_DIRECTIONS):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < h and 0 <= nc < w) or grid[nr][nc] == "#":
                continue
            step = 0 if nd == d else 1
            if cost + step < dist[nr][nc][nd]:
                dist[nr][nc][nd] = cost + step
                if step:
                    queue.append((cost + 1, nr, nc, nd))
                else:
                    queue.appendleft((cost, nr, nc, nd))
    best = min(dist[er][ec])
    return None if best == inf else best


def longest_cycle_tour(grid: Sequence[str]) -> int:
    """Length of the longest simple cycle through '.' cells; -1 if there is none."""
    h = len(grid)
    w = len(grid[0]) if h else 0
    used = [[False] * w for _ in range(h)]
    best = -1

    def explore(x: int, y: int, count: int, sx: int, sy: int) -> None:
        nonlocal best
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < h and 0 <= ny < w):
                continue
            if grid[nx][ny] == "." and not used[nx][ny]:
                used[nx][ny] = True
                explore(nx, ny, count + 1, sx, sy)
                used[nx][ny] = False
            if nx == sx and ny == sy and count >= 3:
                best = max(best, count + 1)

    for i in range(h):
        for j in range(w):
            if grid[i][j] == ".":
                used[i][j] = True
                explore(i, j, 0, i, j)
                used[i][j] = False
    return best


def flip_cost(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> int | None:
    """Least total change turning ``a`` into ``b`` by adding a value to whole
    2x2 blocks; None if impossible."""
    grid = [list(row) for row in a]
    h = len(grid)
    w = len(grid[0]) if h else 0
    total = 0
    for i in range(h):
        for j in range(w):
            if grid[i][j] == b[i][j]:
                continue
            if i == h - 1 or j == w - 1:
                return None
            d = b[i][j] - grid[i][j]
            for di in (0, 1):
                for dj in (0, 1):
                    grid[i + di][j + dj] += d
            total += abs(d)
    return total


def max_uniform_block(grid: Sequence[Sequence[int]]) -> int:
    """Largest count of cells in chosen rows and columns all holding one value."""
    h = len(grid)
    columns = list(zip(*grid))
    best = 0
    for size in range(1, h + 1):
        for rows in combinations(range(h), size):
            freq = Counter(
                col[rows[0]]
                for col in columns
                if all(col[i] == col[rows[0]] for i in rows)
            )
            for count in freq.values():
                best = max(best, count * size)
    return best