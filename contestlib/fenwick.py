"""Fenwick (binary indexed) tree for prefix sums."""

from __future__ import annotations


class FenwickTree:
    """Point additions and prefix sums over ``n`` positions."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._tree = [0] * n

    def __len__(self) -> int:
        return self._n

    def add(self, i: int, x) -> None:
        """Add ``x`` at position ``i``."""
        if not 0 <= i < self._n:
            raise IndexError(f"position {i} out of range")
        j = i + 1
        while j <= self._n:
            self._tree[j - 1] += x
            j += j & -j

    def prefix_sum(self, i: int):
        """Sum of positions ``[0, i)``."""
        if not 0 <= i <= self._n:
            raise IndexError(f"prefix length {i} out of range")
        res = 0
        while i > 0:
            res += self._tree[i - 1]
            i &= i - 1
        return res

    def range_sum(self, i: int, j: int):
        """Sum of positions ``[i, j)``."""
        return self.prefix_sum(j) - self.prefix_sum(i)