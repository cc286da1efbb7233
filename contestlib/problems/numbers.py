"""Number problems: powers, gcds, prime factors, digit iterations and bases."""

from __future__ import annotations

import functools
import math
from typing import Sequence

from contestlib.primes import Sieve

LARGE_LIMIT = 10**18
_DIGIT_RING = 100_000
_COIN_LIMIT = 10_000


def log_less_than_power(a: int, b: int, c: int) -> bool:
    """Whether ``a < c**b``; a negative ``b`` counts as zero."""
    return a < c ** max(b, 0)


def cube_cut_count(a: int, b: int, c: int) -> int:
    """Cuts needed to split an ``a x b x c`` block into equal cubes as large as possible."""
    g = math.gcd(a, b, c)
    if g == 0:
        raise ValueError("at least one side must be non-zero")
    return a // g + b // g + c // g - 3


def count_multi_factor(n: int, k: int) -> int:
    """How many integers in ``2..n`` have at least ``k`` distinct prime factors."""
    if n < 2:
        return 0
    sieve = Sieve(n)
    distinct = [0] * (n + 1)
    for p in range(2, n + 1):
        if sieve.is_prime(p):
            for multiple in range(p, n + 1, p):
                distinct[multiple] += 1
    return sum(1 for x in range(2, n + 1) if distinct[x] >= k)


def lcm_or_large(a: int, b: int) -> int | None:
    """Least common multiple of two positive numbers, or None above ``10**18``."""
    if a <= 0 or b <= 0:
        raise ValueError("values must be positive")
    value = a // math.gcd(a, b) * b
    return None if value > LARGE_LIMIT else value


def _digit_sum(x: int) -> int:
    return sum(int(d) for d in str(x))


def _digit_step(x: int) -> int:
    return (x + _digit_sum(x)) % _DIGIT_RING


def digit_sum_steps(n: int, k: int) -> int:
    """Apply ``x -> (x + digit sum of x) mod 100000`` to ``n`` exactly ``k`` times."""
    if not 0 <= n < _DIGIT_RING:
        raise ValueError(f"n must lie in 0..{_DIGIT_RING - 1}")
    if k < 0:
        raise ValueError("k must be non-negative")
    index = {n: 0}
    visited = 1
    while k > 0:
        nxt = _digit_step(n)
        if nxt in index:
            k %= visited - index[nxt]
            break
        k -= 1
        n = nxt
        index[nxt] = visited
        visited += 1
    for _ in range(k):
        n = _digit_step(n)
    return n


def factor_game_steps(n: int) -> int:
    """Fewest rounds to split ``n`` into primes, each round splitting every
    number into two factors."""
    if n < 1:
        raise ValueError("n must be positive")

    @functools.lru_cache(maxsize=None)
    def steps(x: int) -> int:
        best = None
        for i in range(2, math.isqrt(x) + 1):
            if x % i == 0:
                candidate = max(steps(x // i), steps(i)) + 1
                if best is None or candidate < best:
                    best = candidate
        return 0 if best is None else best

    return steps(n)


def base_conversion_steps(n: str, k: int) -> str:
    """Repeat ``k`` times: read ``n`` in base 8, write it in base 9, turn 8s into 5s."""
    if not n or any(ch not in "01234567" for ch in n):
        raise ValueError(f"{n!r} is not an octal number")
    if k < 0:
        raise ValueError("k must be non-negative")
    for _ in range(k):
        value = int(n, 8)
        digits = []
        while value:
            value, r = divmod(value, 9)
            digits.append(str(r))
        n = ("".join(reversed(digits)) or "0").replace("8", "5")
    return n


def min_coins(n: int, coins: Sequence[int]) -> int:
    """Fewest coins of three values paying exactly ``n``; at most 9999 coins
    are tried, and ``n`` is returned when no payment is found."""
    small, middle, large = sorted(coins)
    if small <= 0:
        raise ValueError("coin values must be positive")
    best = n
    i = 0
    while i * large <= n and i < _COIN_LIMIT:
        j = 0
        while i * large + j * middle <= n and i + j < _COIN_LIMIT:
            remain = n - i * large - j * middle
            if remain == 0:
                best = min(best, i + j)
            elif remain % small == 0:
                best = min(best, i + j + remain // small)
            j += 1
        i += 1
    return best