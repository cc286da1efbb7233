"""Linear sieve of smallest prime factors."""

from __future__ import annotations


class Sieve:
    """Smallest prime factor of every number up to ``n`` and the primes."""

    def __init__(self, n: int) -> None:
        self.min_factor = [0] * (n + 1)
        self.primes: list[int] = []
        min_factor, primes = self.min_factor, self.primes
        for i in range(2, n + 1):
            if min_factor[i] == 0:
                min_factor[i] = i
                primes.append(i)
            for p in primes:
                if i * p > n:
                    break
                min_factor[i * p] = p
                if p == min_factor[i]:
                    break

    def is_prime(self, x: int) -> bool:
        if not 0 <= x < len(self.min_factor):
            raise IndexError(f"{x} is outside the sieve")
        return x >= 2 and self.min_factor[x] == x