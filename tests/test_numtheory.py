import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpmath.numtheory import (
    clear_bit,
    count_bits,
    factorize,
    gcd,
    get_bit,
    is_power_of_two,
    is_prime,
    lcm,
    mod_pow,
    power,
    set_bit,
    sieve,
    smallest_prime_factors,
    toggle_bit,
)


@pytest.mark.parametrize("n", [-5, 0, 1])
def test_is_prime_rejects_small(n):
    assert is_prime(n) is False


@given(st.integers(min_value=2, max_value=5000))
def test_is_prime_matches_divisor_definition(n):
    has_divisor = any(n % d == 0 for d in range(2, n))
    assert is_prime(n) is (not has_divisor)


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=10**9))
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=0, max_value=10**6))
def test_lcm_matches_math(a, b):
    assert lcm(a, b) == math.lcm(a, b)


def test_lcm_with_zero():
    assert lcm(0, 7) == 0
    assert lcm(7, 0) == 0


@given(
    st.integers(min_value=-(10**6), max_value=10**6),
    st.integers(min_value=0, max_value=10**4),
    st.integers(min_value=1, max_value=10**9 + 7),
)
def test_mod_pow_matches_builtin(base, exponent, modulus):
    assert mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mod_pow_rejects_bad_arguments():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 7)
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


@given(st.integers(min_value=-50, max_value=50), st.integers(min_value=0, max_value=40))
def test_power_matches_operator(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -3)


@pytest.mark.parametrize("limit", [-1, 0, 1])
def test_sieve_below_two_is_empty(limit):
    assert sieve(limit) == []


@given(st.integers(min_value=2, max_value=3000))
def test_sieve_agrees_with_is_prime(limit):
    assert sieve(limit) == [p for p in range(limit + 1) if is_prime(p)]


@given(st.integers(min_value=0, max_value=2**64), st.integers(min_value=0, max_value=70))
def test_bit_operations(x, k):
    assert get_bit(set_bit(x, k), k) is True
    assert get_bit(clear_bit(x, k), k) is False
    assert toggle_bit(toggle_bit(x, k), k) == x
    assert get_bit(toggle_bit(x, k), k) is (not get_bit(x, k))


def test_bit_index_must_be_non_negative():
    with pytest.raises(ValueError):
        get_bit(5, -1)


@given(st.integers(min_value=0, max_value=2**80))
def test_count_bits_sums_individual_bits(x):
    assert count_bits(x) == sum(get_bit(x, k) for k in range(x.bit_length()))


def test_count_bits_rejects_negative():
    with pytest.raises(ValueError):
        count_bits(-1)


@given(st.integers(min_value=0, max_value=100))
def test_powers_of_two_detected(k):
    assert is_power_of_two(1 << k) is True


@given(st.integers(min_value=-1000, max_value=10**6))
def test_is_power_of_two_matches_popcount(x):
    expected = x > 0 and count_bits(x) == 1
    assert is_power_of_two(x) is expected


@given(st.integers(min_value=1, max_value=10**7))
def test_factorize_reconstructs(n):
    factors = factorize(n)
    assert math.prod(p**e for p, e in factors.items()) == n
    assert all(is_prime(p) and e >= 1 for p, e in factors.items())
    assert list(factors) == sorted(factors)


def test_factorize_one_is_empty():
    assert factorize(1) == {}


def test_factorize_rejects_non_positive():
    with pytest.raises(ValueError):
        factorize(0)


def test_smallest_prime_factors_table():
    limit = 2000
    spf = smallest_prime_factors(limit)
    assert len(spf) == limit + 1
    assert spf[0] == 0 and spf[1] == 1
    for i in range(2, limit + 1):
        assert spf[i] == min(factorize(i))


def test_smallest_prime_factors_rejects_negative():
    with pytest.raises(ValueError):
        smallest_prime_factors(-1)