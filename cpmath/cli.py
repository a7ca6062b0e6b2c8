"""Command line front end reading problem input from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from cpmath.kpower import count_kth_power_pairs
from cpmath.maxdiff import count_max_difference_pairs
from cpmath.opposite import NoCircleError, opposite_person
from cpmath.topk import count_max_sum_choices


class _Tokens:
    """Whitespace separated integers read one at a time."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def next_int(self) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        return int(word)

    def count(self) -> int:
        n = self.next_int()
        if n < 0:
            raise ValueError(f"count must be non-negative, got {n}")
        return n

    def ints(self, n: int) -> list[int]:
        return [self.next_int() for _ in range(n)]


def _opposite(tokens: _Tokens) -> Iterator[int]:
    for _ in range(tokens.count()):
        a, b, c = tokens.ints(3)
        try:
            yield opposite_person(a, b, c)
        except NoCircleError:
            yield -1


def _kpower(tokens: _Tokens) -> Iterator[int]:
    n = tokens.count()
    k = tokens.next_int()
    yield count_kth_power_pairs(tokens.ints(n), k)


def _maxdiff(tokens: _Tokens) -> Iterator[int]:
    for _ in range(tokens.count()):
        yield count_max_difference_pairs(tokens.ints(tokens.count()))


def _topk(tokens: _Tokens) -> Iterator[int]:
    for _ in range(tokens.count()):
        n = tokens.count()
        k = tokens.next_int()
        yield count_max_sum_choices(tokens.ints(n), k)


_COMMANDS: dict[str, tuple[Callable[[_Tokens], Iterator[int]], str]] = {
    "opposite": (_opposite, "t test cases of 'a b c': whom c faces, or -1"),
    "kpower": (_kpower, "'n k' then n values: pairs whose product is a k-th power"),
    "maxdiff": (_maxdiff, "t test cases of n then n values: max-difference pairs"),
    "topk": (_topk, "t test cases of 'n k' then n values: max-sum selections"),
}


def main(argv: list[str] | None = None) -> int:
    """Solve the chosen problem for the input on stdin; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="cpmath", description="Solve counting problems read from stdin."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text)
    args = parser.parse_args(argv)

    handler, _ = _COMMANDS[args.command]
    tokens = _Tokens(sys.stdin.read())
    try:
        for answer in handler(tokens):
            print(answer)
    except ValueError as exc:
        print(f"cpmath: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())