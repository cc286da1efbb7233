"""Double polynomial rolling hash with random symbol signatures."""

from __future__ import annotations

import random
from typing import Iterable, Union

HASH_MOD = (1_000_000_007, 1_000_000_009)
BASE = (23_333, 12_223)

_rng = random.Random()
_signatures: dict[int, tuple[int, int]] = {}
_powers: list[tuple[int, int]] = [(1, 1)]


def _ensure_powers(m: int) -> None:
    while len(_powers) < m:
        p0, p1 = _powers[-1]
        _powers.append((p0 * BASE[0] % HASH_MOD[0], p1 * BASE[1] % HASH_MOD[1]))


def _signature(symbol: int) -> tuple[int, int]:
    sig = _signatures.get(symbol)
    if sig is None:
        sig = (_rng.randrange(HASH_MOD[0]), _rng.randrange(HASH_MOD[1]))
        _signatures[symbol] = sig
    return sig


class RollingHash:
    """Prefix hashes of a string or integer sequence for O(1) substring hashes.

    Characters hash the same as their code points.
    """

    def __init__(self, s: Union[str, Iterable[int]]) -> None:
        symbols = [ord(c) for c in s] if isinstance(s, str) else list(s)
        m0, m1 = HASH_MOD
        b0, b1 = BASE
        h = [(0, 0)]
        for symbol in symbols:
            s0, s1 = _signature(symbol)
            h0, h1 = h[-1]
            h.append(((h0 * b0 + s0) % m0, (h1 * b1 + s1) % m1))
        _ensure_powers(len(symbols) + 1)
        self._h = h

    def __len__(self) -> int:
        return len(self._h) - 1

    def get(self, l: int, r: int) -> tuple[int, int]:
        """Hash of the slice ``[l, r)``."""
        if not 0 <= l <= r <= len(self):
            raise IndexError(f"range [{l}, {r}) out of range")
        hr, hl, p = self._h[r], self._h[l], _powers[r - l]
        return tuple((hr[i] - hl[i] * p[i]) % HASH_MOD[i] for i in range(2))