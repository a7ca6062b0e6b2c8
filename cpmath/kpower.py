"""Counting pairs whose product is a perfect k-th power."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from cpmath.numtheory import factorize

Signature = tuple[tuple[int, int], ...]


def _check_k(k: int) -> None:
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")


def signature(n: int, k: int) -> Signature:
    """Return the prime exponents of ``n`` reduced modulo ``k``.

    Primes whose exponent is a multiple of ``k`` are dropped; the rest
    appear as ``(prime, exponent)`` pairs in increasing prime order.
    """
    _check_k(k)
    return tuple(
        (prime, exponent % k)
        for prime, exponent in factorize(n).items()
        if exponent % k
    )


def complement(sig: Signature, k: int) -> Signature:
    """Return the signature a partner needs to complete a k-th power."""
    _check_k(k)
    return tuple(
        (prime, (k - exponent) % k) for prime, exponent in sig if (k - exponent) % k
    )


def count_kth_power_pairs(values: Iterable[int], k: int) -> int:
    """Count unordered pairs ``i < j`` with ``values[i] * values[j]`` a k-th power."""
    _check_k(k)
    seen: Counter[Signature] = Counter()
    pairs = 0
    for value in values:
        sig = signature(value, k)
        pairs += seen[complement(sig, k)]
        seen[sig] += 1
    return pairs