"""Segment trees over a monoid, with and without lazy range updates."""

from __future__ import annotations

from typing import Callable, Generic, Sequence, TypeVar, Union

S = TypeVar("S")
F = TypeVar("F")


def _bit_ceil(n: int) -> int:
    x = 1
    while x < n:
        x *= 2
    return x


def _initial(e: Callable[[], S], v: Union[int, Sequence[S]]) -> list:
    if isinstance(v, int):
        return [e() for _ in range(v)]
    return list(v)


class SegTree(Generic[S]):
    """Point updates and range products under an associative ``op``.

    ``e`` is a callable returning the identity; ``v`` is a length or the
    initial values.
    """

    def __init__(self, op: Callable[[S, S], S], e: Callable[[], S], v) -> None:
        self._op = op
        self._e = e
        values = _initial(e, v)
        self._n = len(values)
        self._size = _bit_ceil(self._n)
        self._log = self._size.bit_length() - 1
        self._d = [e() for _ in range(2 * self._size)]
        self._d[self._size:self._size + self._n] = values
        for i in range(self._size - 1, 0, -1):
            self._update(i)

    def __len__(self) -> int:
        return self._n

    def _update(self, k: int) -> None:
        self._d[k] = self._op(self._d[2 * k], self._d[2 * k + 1])

    def _check_index(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of range")

    def set(self, p: int, x: S) -> None:
        self._check_index(p)
        p += self._size
        self._d[p] = x
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def get(self, p: int) -> S:
        self._check_index(p)
        return self._d[p + self._size]

    def prod(self, l: int, r: int) -> S:
        """Product over ``[l, r)``."""
        self._check_range(l, r)
        op, d = self._op, self._d
        sml, smr = self._e(), self._e()
        l += self._size
        r += self._size
        while l < r:
            if l & 1:
                sml = op(sml, d[l])
                l += 1
            if r & 1:
                r -= 1
                smr = op(d[r], smr)
            l >>= 1
            r >>= 1
        return op(sml, smr)

    def all_prod(self) -> S:
        return self._d[1]

    def max_right(self, l: int, f: Callable[[S], bool]) -> int:
        """Largest ``r`` with ``f(prod(l, r))`` true, for a monotone ``f``."""
        if not 0 <= l <= self._n:
            raise IndexError(f"position {l} out of range")
        if not f(self._e()):
            raise ValueError("predicate must hold for the identity")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        sm = self._e()
        while True:
            while l % 2 == 0:
                l >>= 1
            if not f(op(sm, d[l])):
                while l < size:
                    l *= 2
                    if f(op(sm, d[l])):
                        sm = op(sm, d[l])
                        l += 1
                return l - size
            sm = op(sm, d[l])
            l += 1
            if (l & -l) == l:
                return self._n

    def min_left(self, r: int, f: Callable[[S], bool]) -> int:
        """Smallest ``l`` with ``f(prod(l, r))`` true, for a monotone ``f``."""
        if not 0 <= r <= self._n:
            raise IndexError(f"position {r} out of range")
        if not f(self._e()):
            raise ValueError("predicate must hold for the identity")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        sm = self._e()
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not f(op(d[r], sm)):
                while r < size:
                    r = 2 * r + 1
                    if f(op(d[r], sm)):
                        sm = op(d[r], sm)
                        r -= 1
                return r + 1 - size
            sm = op(d[r], sm)
            if (r & -r) == r:
                return 0


class LazySegTree(Generic[S, F]):
    """Range products with lazily propagated range maps.

    ``mapping(f, x)`` applies a map to a value, ``composition(f, g)`` is
    ``f`` after ``g`` and ``identity()`` returns the identity map.
    """

    def __init__(
        self,
        op: Callable[[S, S], S],
        e: Callable[[], S],
        mapping: Callable[[F, S], S],
        composition: Callable[[F, F], F],
        identity: Callable[[], F],
        v,
    ) -> None:
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._identity = identity
        values = _initial(e, v)
        self._n = len(values)
        self._size = _bit_ceil(self._n)
        self._log = self._size.bit_length() - 1
        self._d = [e() for _ in range(2 * self._size)]
        self._d[self._size:self._size + self._n] = values
        self._lz = [identity() for _ in range(self._size)]
        for i in range(self._size - 1, 0, -1):
            self._update(i)

    def __len__(self) -> int:
        return self._n

    def _update(self, k: int) -> None:
        self._d[k] = self._op(self._d[2 * k], self._d[2 * k + 1])

    def _all_apply(self, k: int, f: F) -> None:
        self._d[k] = self._mapping(f, self._d[k])
        if k < self._size:
            self._lz[k] = self._composition(f, self._lz[k])

    def _push(self, k: int) -> None:
        self._all_apply(2 * k, self._lz[k])
        self._all_apply(2 * k + 1, self._lz[k])
        self._lz[k] = self._identity()

    def _check_index(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of range")

    def _push_path(self, p: int) -> None:
        for i in range(self._log, 0, -1):
            self._push(p >> i)

    def _push_bounds(self, l: int, r: int) -> None:
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)

    def set(self, p: int, x: S) -> None:
        self._check_index(p)
        p += self._size
        self._push_path(p)
        self._d[p] = x
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def get(self, p: int) -> S:
        self._check_index(p)
        p += self._size
        self._push_path(p)
        return self._d[p]

    def prod(self, l: int, r: int) -> S:
        """Product over ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return self._e()
        l += self._size
        r += self._size
        self._push_bounds(l, r)
        op, d = self._op, self._d
        sml, smr = self._e(), self._e()
        while l < r:
            if l & 1:
                sml = op(sml, d[l])
                l += 1
            if r & 1:
                r -= 1
                smr = op(d[r], smr)
            l >>= 1
            r >>= 1
        return op(sml, smr)

    def all_prod(self) -> S:
        return self._d[1]

    def apply(self, p: int, f: F) -> None:
        """Apply ``f`` at a single position."""
        self._check_index(p)
        p += self._size
        self._push_path(p)
        self._d[p] = self._mapping(f, self._d[p])
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def apply_range(self, l: int, r: int, f: F) -> None:
        """Apply ``f`` to every position in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return
        l += self._size
        r += self._size
        self._push_bounds(l, r)
        a, b = l, r
        while a < b:
            if a & 1:
                self._all_apply(a, f)
                a += 1
            if b & 1:
                b -= 1
                self._all_apply(b, f)
            a >>= 1
            b >>= 1
        for i in range(1, self._log + 1):
            if ((l >> i) << i) != l:
                self._update(l >> i)
            if ((r >> i) << i) != r:
                self._update((r - 1) >> i)

    def max_right(self, l: int, g: Callable[[S], bool]) -> int:
        """Largest ``r`` with ``g(prod(l, r))`` true, for a monotone ``g``."""
        if not 0 <= l <= self._n:
            raise IndexError(f"position {l} out of range")
        if not g(self._e()):
            raise ValueError("predicate must hold for the identity")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        self._push_path(l)
        sm = self._e()
        while True:
            while l % 2 == 0:
                l >>= 1
            if not g(op(sm, d[l])):
                while l < size:
                    self._push(l)
                    l *= 2
                    if g(op(sm, d[l])):
                        sm = op(sm, d[l])
                        l += 1
                return l - size
            sm = op(sm, d[l])
            l += 1
            if (l & -l) == l:
                return self._n

    def min_left(self, r: int, g: Callable[[S], bool]) -> int:
        """Smallest ``l`` with ``g(prod(l, r))`` true, for a monotone ``g``."""
        if not 0 <= r <= self._n:
            raise IndexError(f"position {r} out of range")
        if not g(self._e()):
            raise ValueError("predicate must hold for the identity")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        for i in range(self._log, 0, -1):
            self._push((r - 1) >> i)
        sm = self._e()
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not g(op(d[r], sm)):
                while r < size:
                    self._push(r)
                    r = 2 * r + 1
                    if g(op(d[r], sm)):
                        sm = op(d[r], sm)
                        r -= 1
                return r + 1 - size
            sm = op(d[r], sm)
            if (r & -r) == r:
                return 0