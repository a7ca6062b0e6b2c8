"""Counting the ways to pick k values with the largest possible sum."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 10**9 + 7


def factorial_table(limit: int, modulus: int = MOD) -> list[int]:
    """Return ``[0!, 1!, ..., limit!]`` reduced modulo ``modulus``."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    table = [1 % modulus]
    for i in range(1, limit + 1):
        table.append(table[-1] * i % modulus)
    return table


def binomial_mod(n: int, k: int, modulus: int = MOD) -> int:
    """Return C(n, k) modulo a prime ``modulus`` larger than ``n``.

    Inverses come from Fermat's little theorem.
    """
    if n < 0 or not 0 <= k <= n:
        raise ValueError("need 0 <= k <= n")
    fac = factorial_table(n, modulus)
    inv_k = pow(fac[k], modulus - 2, modulus)
    inv_rest = pow(fac[n - k], modulus - 2, modulus)
    return fac[n] * inv_k % modulus * inv_rest % modulus


def count_max_sum_choices(values: Iterable[int], k: int) -> int:
    """Count the k-element selections whose sum is maximal, modulo 10^9+7.

    Only the smallest value among the top k can be swapped for an equal one,
    so the answer is C(occurrences of it, how many of it are in the top k).
    """
    ordered = sorted(values, reverse=True)
    if not 1 <= k <= len(ordered):
        raise ValueError("k must be between 1 and the number of values")
    boundary = ordered[k - 1]
    total = ordered.count(boundary)
    taken = ordered[:k].count(boundary)
    return binomial_mod(total, taken)