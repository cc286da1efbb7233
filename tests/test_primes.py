import pytest

from contestlib.primes import Sieve


def _trial_division_primes(n):
    return [p for p in range(2, n + 1) if all(p % d for d in range(2, p))]


def test_primes_match_trial_division():
    sieve = Sieve(200)
    assert sieve.primes == _trial_division_primes(200)


def test_min_factor_is_smallest_prime_divisor():
    sieve = Sieve(300)
    for x in range(2, 301):
        f = sieve.min_factor[x]
        assert x % f == 0
        assert sieve.is_prime(f)
        assert all(x % d for d in range(2, f))


def test_is_prime_agrees_with_list():
    sieve = Sieve(100)
    primes = set(sieve.primes)
    for x in range(1, 101):
        assert sieve.is_prime(x) == (x in primes)


def test_out_of_range():
    sieve = Sieve(10)
    with pytest.raises(IndexError):
        sieve.is_prime(11)
    with pytest.raises(IndexError):
        sieve.is_prime(-1)