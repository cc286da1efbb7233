"""Counting problems answered exactly or modulo a prime."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, Sequence

from contestlib.modint import Factorials, modnum_type

MOD_1E9_7 = 1_000_000_007
MOD_998 = 998_244_353
_PATTERN = "atcoder"
_BOX_SIDE_LIMIT = 10_000
_RESIDUE = 46

_Num = modnum_type(MOD_1E9_7)


def count_atcoder_subsequences(s: str) -> int:
    """Number of subsequences of ``s`` spelling "atcoder", modulo 10**9+7."""
    dp = [_Num(0) for _ in _PATTERN]
    position = {ch: j for j, ch in enumerate(_PATTERN)}
    for ch in s:
        j = position.get(ch)
        if j is None:
            continue
        dp[j] += 1 if j == 0 else dp[j - 1]
    return int(dp[-1])


def count_spaced_selections(n: int) -> list[int]:
    """For each ``k`` in ``1..n``, the number of non-empty subsets of ``1..n``
    whose elements pairwise differ by at least ``k``, modulo 10**9+7."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = Factorials(n + 1, MOD_1E9_7)
    answers = []
    for k in range(1, n + 1):
        total = _Num(0)
        a, reach = 1, 1
        while reach <= n:
            total += table.ncr(n - (k - 1) * (a - 1), a)
            a += 1
            reach += k
        answers.append(int(total))
    return answers


def count_stair_climbs(n: int, l: int) -> int:
    """Ways to climb ``n`` steps with moves of 1 or ``l`` steps, modulo 10**9+7."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if l < 1:
        raise ValueError("step length must be positive")
    dp = [_Num(0) for _ in range(n + 1)]
    dp[0] = _Num(1)
    for i in range(n):
        dp[i + 1] += dp[i]
        if i + l <= n:
            dp[i + l] += dp[i]
    return int(dp[-1])


def count_colorings(n: int, k: int) -> int:
    """Colourings of ``n`` objects in a row with ``k`` colours where objects
    one or two apart differ, modulo 10**9+7."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return int(_Num(k))
    if n == 2:
        return int(_Num(k) * (k - 1))
    if n == 3:
        return int(_Num(k) * _Num(k - 1) * _Num(k - 2))
    return int(_Num(k) * _Num(k - 1) * _Num(k - 2) ** (n - 2))


def count_switch_patterns(
    m: int, switches: Iterable[Iterable[int]], target: Sequence[int]
) -> int:
    """Switch subsets whose toggled lamps (0-based) give ``target``, modulo 998244353.

    Each switch toggles the lamps it lists; ``target`` holds 0 or 1 per lamp.
    """
    if len(target) != m:
        raise ValueError("target must give a state for every lamp")
    rows = []
    for lamps in switches:
        mask = 0
        for c in lamps:
            if not 0 <= c < m:
                raise ValueError(f"lamp {c} out of range")
            mask |= 1 << c
        rows.append(mask)
    state = sum(1 << i for i, t in enumerate(target) if t)
    n = len(rows)
    rank = 0
    for i in range(m):
        bit = 1 << i
        pivot = next((j for j in range(rank, n) if rows[j] & bit), None)
        if pivot is None:
            continue
        rows[rank], rows[pivot] = rows[pivot], rows[rank]
        high = rows[rank] >> i << i
        for j, row in enumerate(rows):
            if j != rank and row & bit:
                rows[j] = row ^ high
        if state & bit:
            state ^= high
        rank += 1
    if state:
        return 0
    return pow(2, n - rank, MOD_998)


def count_avoiding_values(d: int, a: Sequence[int]) -> int:
    """Count ``x`` in ``[0, 2**d)`` sharing at least one bit with every ``a[i]``."""
    if d < 0:
        raise ValueError("d must be non-negative")
    n = len(a)
    low = (1 << d) - 1
    union = [0] * (1 << n)
    total = 1 << d
    for mask in range(1, 1 << n):
        lowest = (mask & -mask).bit_length() - 1
        union[mask] = union[mask & (mask - 1)] | a[lowest]
        free = d - (union[mask] & low).bit_count()
        if mask.bit_count() % 2 == 0:
            total += 1 << free
        else:
            total -= 1 << free
    return total


def count_box_triples(k: int) -> int:
    """Number of ``a <= b <= c`` with ``a * b * c == k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    count = 0
    for a in range(1, _BOX_SIDE_LIMIT + 1):
        if k % a:
            continue
        bc = k // a
        divisors = set()
        for i in range(1, math.isqrt(bc) + 1):
            if bc % i == 0:
                divisors.update((i, bc // i))
        count += sum(1 for b in divisors if a <= b <= bc // b)
    return count


def count_triples_mod46(a: Iterable[int], b: Iterable[int], c: Iterable[int]) -> int:
    """Number of choices, one from each list, whose sum is divisible by 46."""
    ca, cb, cc = (Counter(x % _RESIDUE for x in seq) for seq in (a, b, c))
    return sum(
        ca[i] * cb[j] * cc[(-i - j) % _RESIDUE]
        for i in range(_RESIDUE)
        for j in range(_RESIDUE)
    )