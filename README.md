# cpmath

Small, dependency-free routines for classic counting and number-theory
problems: primes and factorization, modular arithmetic, binomial
coefficients, and four ready-made problem solvers with a command-line
front end.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### Number theory (`cpmath.numtheory`)

```python
from cpmath.numtheory import (
    is_prime, gcd, lcm, mod_pow, power, sieve,
    smallest_prime_factors, factorize,
    get_bit, set_bit, clear_bit, toggle_bit, count_bits, is_power_of_two,
)

is_prime(97)            # True
gcd(12, 18)             # 6
lcm(4, 6)               # 12
mod_pow(2, 10, 1000)    # 24
power(3, 4)             # 81
sieve(20)               # [2, 3, 5, 7, 11, 13, 17, 19]
factorize(360)          # {2: 3, 3: 2, 5: 1}
```

- `smallest_prime_factors(limit)` returns a list whose entry `i` is the
  smallest prime factor of `i` (entries 0 and 1 hold 0 and 1).
- `factorize(n)` returns `{prime: exponent}` in increasing prime order;
  `factorize(1)` is `{}` and non-positive `n` raises `ValueError`.
- `lcm` returns 0 when either argument is 0.
- `mod_pow` and `power` raise `ValueError` for a negative exponent;
  `mod_pow` also for a non-positive modulus.
- The bit helpers take a non-negative bit index `k` and raise
  `ValueError` otherwise. `count_bits` rejects negative numbers;
  `is_power_of_two` is true only for positive powers of two.

### Who is opposite (`cpmath.opposite`)

People numbered clockwise from 1 stand in an even-sized circle, each
looking at the person directly opposite. Given that `a` looks at `b`,
find whom `c` looks at:

```python
from cpmath.opposite import opposite_person, circle_size, NoCircleError

circle_size(6, 2)           # 8
opposite_person(6, 2, 4)    # 8
opposite_person(1, 3, 2)    # 4

try:
    opposite_person(2, 3, 1)
except NoCircleError:
    print("no such circle")
```

`circle_size(a, b)` is `2 * |a - b|`. `NoCircleError` (a subclass of
`ValueError`) is raised when `a == b` or when any of `a`, `b`, `c` is
larger than the circle. Person numbers below 1 raise a plain
`ValueError`.

### Pairs whose product is a k-th power (`cpmath.kpower`)

Counts unordered pairs `i < j` for which `values[i] * values[j]` is a
perfect `k`-th power:

```python
from cpmath.kpower import count_kth_power_pairs, signature, complement

count_kth_power_pairs([1, 3, 9, 8, 24, 1], 3)   # 5
signature(24, 3)                                # ((3, 1),)
complement(((3, 1),), 3)                        # ((3, 2),)
```

`signature(n, k)` gives the prime exponents of `n` reduced modulo `k`,
dropping primes whose exponent is a multiple of `k`; `complement(sig, k)`
gives the signature a partner must have. A `k` below 1 raises
`ValueError`.

### Pairs with the largest difference (`cpmath.maxdiff`)

Counts ordered pairs `(i, j)`, `i != j`, whose absolute difference is the
largest in the list:

```python
from cpmath.maxdiff import count_max_difference_pairs

count_max_difference_pairs([6, 2, 3, 8, 1])   # 2
count_max_difference_pairs([5, 5, 5])         # 6
```

An empty input raises `ValueError`.

### Ways to pick k values with the largest sum (`cpmath.topk`)

```python
from cpmath.topk import count_max_sum_choices, binomial_mod, factorial_table

count_max_sum_choices([1, 3, 1, 2], 3)   # 2
binomial_mod(5, 2)                       # 10
factorial_table(5)                       # [1, 1, 2, 6, 24, 120]
```

Results are reduced modulo 1 000 000 007 by default. `binomial_mod`
uses Fermat inverses, so its modulus must be a prime larger than `n`.
`count_max_sum_choices` raises `ValueError` unless `1 <= k <= len(values)`.

## Command line

The `cpmath` command reads whitespace-separated integers from standard
input and prints one answer per line:

```
cpmath --help
```

| Subcommand | Input |
|------------|-------|
| `opposite` | `t`, then `t` lines of `a b c`; prints whom `c` faces, or `-1` |
| `kpower`   | `n k`, then `n` values; prints the number of k-th power pairs |
| `maxdiff`  | `t`, then for each case `n` and `n` values |
| `topk`     | `t`, then for each case `n k` and `n` values |

For example:

```
$ printf '3\n6 2 4\n2 3 1\n1 3 2\n' | cpmath opposite
8
-1
4
```

Malformed or truncated input makes the command print an error to
standard error and exit with status 1.