"""Elementary number theory and bit manipulation helpers."""

from __future__ import annotations

from math import isqrt


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero if either argument is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` for a non-negative integer exponent."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return base**exponent


def sieve(limit: int) -> list[int]:
    """Return all primes up to and including ``limit``."""
    if limit < 2:
        return []
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return [i for i, flag in enumerate(flags) if flag]


def _check_bit_index(k: int) -> None:
    if k < 0:
        raise ValueError("bit index must be non-negative")


def get_bit(x: int, k: int) -> bool:
    """Return whether bit ``k`` of ``x`` is set."""
    _check_bit_index(k)
    return bool((x >> k) & 1)


def set_bit(x: int, k: int) -> int:
    """Return ``x`` with bit ``k`` set."""
    _check_bit_index(k)
    return x | (1 << k)


def clear_bit(x: int, k: int) -> int:
    """Return ``x`` with bit ``k`` cleared."""
    _check_bit_index(k)
    return x & ~(1 << k)


def toggle_bit(x: int, k: int) -> int:
    """Return ``x`` with bit ``k`` flipped."""
    _check_bit_index(k)
    return x ^ (1 << k)


def count_bits(x: int) -> int:
    """Return the number of set bits in a non-negative integer."""
    if x < 0:
        raise ValueError("cannot count bits of a negative number")
    return bin(x).count("1")


def is_power_of_two(x: int) -> bool:
    """Return True if ``x`` is a positive power of two."""
    return x > 0 and not (x & (x - 1))


def smallest_prime_factors(limit: int) -> list[int]:
    """Return a table whose entry ``i`` is the smallest prime factor of ``i``.

    Entries 0 and 1 hold 0 and 1 respectively.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    spf = list(range(limit + 1))
    for i in range(2, isqrt(limit) + 1):
        if spf[i] == i:
            for j in range(i * i, limit + 1, i):
                if spf[j] == j:
                    spf[j] = i
    return spf


def factorize(n: int) -> dict[int, int]:
    """Return the prime factorisation of ``n`` as ``{prime: exponent}``.

    The primes appear in increasing order; ``factorize(1)`` is empty.
    """
    if n < 1:
        raise ValueError("only positive integers can be factorised")
    factors: dict[int, int] = {}
    p = 2
    while p * p <= n:
        while n % p == 0:
            n //= p
            factors[p] = factors.get(p, 0) + 1
        p += 1
    if n > 1:
        factors[n] = factors.get(n, 0) + 1
    return factors