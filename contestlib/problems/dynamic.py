"""Dynamic programming problems: scheduling, pairing, subsets and games."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from contestlib.sequences import lis


def max_job_reward(jobs: Iterable[tuple[int, int, int]]) -> int:
    """Best total reward of jobs ``(deadline, duration, reward)`` done one at a
    time from day 1, each finished by its deadline."""
    jobs = sorted(jobs, key=lambda job: (job[0], job[1], -job[2]))
    for _, c, _ in jobs:
        if c < 1:
            raise ValueError("durations must be positive")
    horizon = max((d for d, _, _ in jobs), default=0)
    best = [0] * (horizon + 1)
    for d, c, s in jobs:
        nxt = best.copy()
        for end in range(c, d + 1):
            candidate = best[end - c] + s
            if candidate > nxt[end]:
                nxt[end] = candidate
        best = nxt
    return max(best)


def min_pairing_cost(a: Sequence[int]) -> int:
    """Least total ``|x - y|`` for repeatedly removing adjacent pairs until empty."""
    a = list(a)
    n = len(a)
    if n % 2:
        raise ValueError("an even number of values is required")
    if n == 0:
        return 0
    dp = [[0] * n for _ in range(n)]
    for i in range(n - 1):
        dp[i][i + 1] = abs(a[i] - a[i + 1])
    for length in range(4, n + 1, 2):
        for l in range(n - length + 1):
            r = l + length - 1
            best = dp[l + 1][r - 1] + abs(a[l] - a[r])
            for k in range(l + 1, r, 2):
                best = min(best, dp[l][k] + dp[k + 1][r])
            dp[l][r] = best
    return dp[0][n - 1]


def min_relay_time(
    times: Sequence[Sequence[int]], bans: Iterable[tuple[int, int]]
) -> int | None:
    """Fastest relay where runner ``i`` takes ``times[i][leg]`` on a leg and banned
    pairs never run consecutive legs; None if no order is allowed."""
    n = len(times)
    if n == 0:
        raise ValueError("at least one runner is required")
    if any(len(row) != n for row in times):
        raise ValueError("times must be square")
    banned = [[False] * n for _ in range(n)]
    for x, y in bans:
        banned[x][y] = banned[y][x] = True
    inf = math.inf
    full = 1 << n
    dp = [[inf] * n for _ in range(full)]
    for i in range(n):
        dp[1 << i][i] = times[i][0]
    for mask in range(1, full):
        leg = bin(mask).count("1")
        if leg == n:
            continue
        row = dp[mask]
        for i in range(n):
            if not mask >> i & 1 or row[i] == inf:
                continue
            for j in range(n):
                if not mask >> j & 1 and not banned[i][j]:
                    candidate = row[i] + times[j][leg]
                    target = dp[mask | 1 << j]
                    if candidate < target[j]:
                        target[j] = candidate
    best = min(dp[full - 1])
    return None if best == inf else best


def min_group_diameter(points: Sequence[tuple[int, int]], k: int) -> int:
    """Least possible largest squared group diameter when splitting points into ``k``
    non-empty groups."""
    pts = list(points)
    n = len(pts)
    if not 1 <= k <= n:
        raise ValueError("k must lie between 1 and the number of points")
    full = 1 << n
    diameter = [0] * full
    for mask in range(1, full):
        low = (mask & -mask).bit_length() - 1
        rest = mask & (mask - 1)
        x0, y0 = pts[low]
        far = max(
            ((x0 - x) ** 2 + (y0 - y) ** 2 for j, (x, y) in enumerate(pts) if rest >> j & 1),
            default=0,
        )
        diameter[mask] = max(diameter[rest], far)
    prev = [math.inf] * full
    prev[0] = 0
    for groups in range(1, k + 1):
        cur = [math.inf] * full
        for mask in range(1, full):
            if bin(mask).count("1") < groups:
                continue
            best = math.inf
            sub = mask
            while sub:
                candidate = max(prev[mask ^ sub], diameter[sub])
                if candidate < best:
                    best = candidate
                sub = (sub - 1) & mask
            cur[mask] = best
        prev = cur
    return prev[full - 1]


def choose_purchase_plan(s: int, options: Sequence[tuple[int, int]]) -> str | None:
    """Choose 'A' or 'B' each day so the chosen prices total exactly ``s``.

    Returns the choices as a string, or None if impossible.
    """
    options = list(options)
    reachable = [False] * (s + 1)
    if s >= 0:
        reachable[0] = True
    status: list[list[int]] = []
    for a, b in options:
        nxt = [False] * (s + 1)
        choice = [-1] * (s + 1)
        for j in range(s):
            if reachable[j]:
                if j + a <= s:
                    nxt[j + a] = True
                    choice[j + a] = 0
                if j + b <= s:
                    nxt[j + b] = True
                    choice[j + b] = 1
        status.append(choice)
        reachable = nxt
    if s < 0 or not reachable[s]:
        return None
    plan = []
    cur = s
    for (a, b), choice in zip(reversed(options), reversed(status)):
        if choice[cur] == 0:
            plan.append("A")
            cur -= a
        else:
            plan.append("B")
            cur -= b
    return "".join(reversed(plan))


def longest_mountain(a: Sequence[int]) -> int:
    """Longest subsequence that strictly rises and then strictly falls."""
    a = list(a)
    n = len(a)
    if n == 0:
        return 0
    up = lis(a)
    down = lis(a[::-1])
    return max(1, max(up[i] + down[n - 1 - i] - 1 for i in range(n)))


def nim_winner(whites: Sequence[int], blues: Sequence[int]) -> str:
    """Winner, "First" or "Second", of the white/blue stone game on all boxes.

    A move either turns one white stone into as many blue stones as there were
    whites, or removes at most half of the blue stones from a box.
    """
    whites, blues = list(whites), list(blues)
    if len(whites) != len(blues):
        raise ValueError("one blue count per white count is required")
    if any(x < 0 for x in whites + blues):
        raise ValueError("stone counts must be non-negative")
    max_w = max(whites, default=0)
    max_b = max(blues, default=0)
    limits = [max_b + sum(range(w + 1, max_w + 1)) for w in range(max_w + 1)]
    table: list[list[int]] = []
    for w, limit in enumerate(limits):
        row: list[int] = []
        for b in range(limit + 1):
            options = set(row[(b + 1) // 2:b])
            if w >= 1:
                options.add(table[w - 1][b + w])
            g = 0
            while g in options:
                g += 1
            row.append(g)
        table.append(row)
    grundy = 0
    for w, b in zip(whites, blues):
        grundy ^= table[w][b]
    return "Second" if grundy == 0 else "First"