"""Finding who stands opposite whom in an even circle of people."""

from __future__ import annotations


class NoCircleError(ValueError):
    """Raised when no even circle fits the given people."""


def _check_person(number: int, name: str) -> None:
    if number < 1:
        raise ValueError(f"person {name} must be numbered from 1, got {number}")


def circle_size(a: int, b: int) -> int:
    """Return the number of people in a circle where ``a`` faces ``b``.

    Opposite people are half the circle apart, so the size is
    ``2 * |a - b|``. Raises NoCircleError when no such circle exists.
    """
    _check_person(a, "a")
    _check_person(b, "b")
    size = 2 * abs(a - b)
    if size == 0 or max(a, b) > size:
        raise NoCircleError(f"no circle has person {a} facing person {b}")
    return size


def opposite_person(a: int, b: int, c: int) -> int:
    """Return the person that ``c`` faces, given that ``a`` faces ``b``.

    Raises NoCircleError when no circle holds ``a``, ``b`` and ``c``
    with ``a`` facing ``b``.
    """
    _check_person(c, "c")
    size = circle_size(a, b)
    if c > size:
        raise NoCircleError(f"person {c} does not fit in a circle of {size}")
    half = size // 2
    return c + half if c + half <= size else c - half