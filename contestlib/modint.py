"""Modular arithmetic: extended Euclid, residue classes and binomial tables."""

from __future__ import annotations

import functools
from dataclasses import dataclass

MOD = 998_244_353


def _trunc_divmod(y: int, x: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    q = abs(y) // abs(x)
    if (y < 0) != (x < 0):
        q = -q
    return q, y - q * x


def mod_inv_in_range(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m`` for ``0 <= a < m``.

    Raises ValueError when ``a`` and ``m`` are not coprime.
    """
    x, y = a, m
    vx, vy = 1, 0
    while x:
        k, y = _trunc_divmod(y, x)
        vy -= k * vx
        x, y = y, x
        vx, vy = vy, vx
    if y != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return m + vy if vy < 0 else vy


@dataclass(frozen=True)
class ExtendedGcdResult:
    """gcd of two numbers with coefficients: ``a*coeff_a + b*coeff_b == gcd``."""

    gcd: int
    coeff_a: int
    coeff_b: int


def extended_gcd(a: int, b: int) -> ExtendedGcdResult:
    """Extended Euclidean algorithm."""
    x, y = a, b
    ax, ay = 1, 0
    bx, by = 0, 1
    while x:
        k, y = _trunc_divmod(y, x)
        ay -= k * ax
        by -= k * bx
        x, y = y, x
        ax, ay = ay, ax
        bx, by = by, bx
    return ExtendedGcdResult(y, ay, by)


def mod_inv(a: int, m: int) -> int:
    """Inverse of any integer ``a`` modulo a positive ``m``."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    return mod_inv_in_range(a % m, m)


class ModNum:
    """An integer modulo ``MOD``; subclasses from :func:`modnum_type` fix other moduli."""

    __slots__ = ("_v",)
    MOD: int = MOD

    def __init__(self, value: int = 0) -> None:
        self._v = int(value) % self.MOD

    @classmethod
    def _make(cls, v: int) -> ModNum:
        obj = object.__new__(cls)
        obj._v = v
        return obj

    def _residue(self, other: object) -> int | None:
        if isinstance(other, ModNum):
            if other.MOD != self.MOD:
                raise TypeError(f"cannot mix moduli {self.MOD} and {other.MOD}")
            return other._v
        if isinstance(other, int):
            return other % self.MOD
        return None

    def inv(self) -> ModNum:
        """Multiplicative inverse; ValueError if there is none."""
        return self._make(mod_inv_in_range(self._v, self.MOD))

    def __int__(self) -> int:
        return self._v

    def __add__(self, other):
        r = self._residue(other)
        if r is None:
            return NotImplemented
        return self._make((self._v + r) % self.MOD)

    __radd__ = __add__

    def __sub__(self, other):
        r = self._residue(other)
        if r is None:
            return NotImplemented
        return self._make((self._v - r) % self.MOD)

    def __rsub__(self, other):
        r = self._residue(other)
        if r is None:
            return NotImplemented
        return self._make((r - self._v) % self.MOD)

    def __mul__(self, other):
        r = self._residue(other)
        if r is None:
            return NotImplemented
        return self._make(self._v * r % self.MOD)

    __rmul__ = __mul__

    def __truediv__(self, other):
        r = self._residue(other)
        if r is None:
            return NotImplemented
        return self._make(self._v * mod_inv_in_range(r, self.MOD) % self.MOD)

    def __rtruediv__(self, other):
        r = self._residue(other)
        if r is None:
            return NotImplemented
        return self._make(r * self.inv()._v % self.MOD)

    def __neg__(self) -> ModNum:
        return self._make(self.MOD - self._v if self._v else 0)

    def __pos__(self) -> ModNum:
        return self._make(self._v)

    def __pow__(self, exponent: int) -> ModNum:
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return self._make(pow(self._v, exponent, self.MOD))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModNum) and other.MOD != self.MOD:
            return False
        r = self._residue(other)
        if r is None:
            return NotImplemented
        return self._v == r

    def __hash__(self) -> int:
        return hash(self._v)

    def __bool__(self) -> bool:
        return self._v != 0

    def __str__(self) -> str:
        return str(self._v)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._v})"


@functools.lru_cache(maxsize=None)
def modnum_type(mod: int) -> type[ModNum]:
    """The ModNum class for a given positive modulus."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    if mod == ModNum.MOD:
        return ModNum

    class _Bound(ModNum):
        __slots__ = ()
        MOD = mod

    _Bound.__name__ = _Bound.__qualname__ = f"ModNum{mod}"
    return _Bound


class Factorials:
    """Precomputed factorials and inverse factorials below ``size``."""

    def __init__(self, size: int = 410_000, mod: int = MOD) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._num = modnum_type(mod)
        self._mod = mod
        fact = [1] * size
        for i in range(1, size):
            fact[i] = fact[i - 1] * i % mod
        ifact = [1] * size
        ifact[-1] = mod_inv(fact[-1], mod)
        for i in range(size - 1, 0, -1):
            ifact[i - 1] = ifact[i] * i % mod
        self._fact = fact
        self._ifact = ifact

    def ncr(self, n: int, k: int) -> ModNum:
        """Binomial coefficient ``C(n, k)``; zero outside ``0 <= k <= n``."""
        if k < 0 or k > n:
            return self._num(0)
        if n >= len(self._fact):
            raise IndexError(f"{n} is beyond the table size {len(self._fact)}")
        m = self._mod
        return self._num(self._fact[n] * self._ifact[k] % m * self._ifact[n - k])


def modpow(a: int, k: int) -> int:
    """``a**k`` modulo MOD; a non-positive exponent gives 1."""
    if k <= 0:
        return 1
    return pow(a, k, MOD)


def modinv(a: int) -> int:
    """Inverse modulo the prime MOD by Fermat's little theorem."""
    return modpow(a, MOD - 2)


class _BinomialTable:
    def __init__(self) -> None:
        self.fact = [1]
        self.ifact = [1]

    def __call__(self, a: int, b: int) -> int:
        if a < b or b < 0:
            return 0
        fact, ifact = self.fact, self.ifact
        if len(fact) <= a:
            n = len(fact)
            m = n
            while m <= a:
                m *= 2
            for i in range(n, m):
                fact.append(fact[i - 1] * i % MOD)
            ifact.extend([0] * (m - n))
            ifact[m - 1] = modinv(fact[m - 1])
            for i in range(m - 1, n, -1):
                ifact[i - 1] = ifact[i] * i % MOD
        return fact[a] * ifact[b] % MOD * ifact[a - b] % MOD


_binomials = _BinomialTable()


def binom(a: int, b: int) -> int:
    """``C(a, b)`` modulo MOD, growing a shared table as needed."""
    return _binomials(a, b)