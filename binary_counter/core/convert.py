"""Conversions between natural numbers (Python ints >= 0) and trees."""

from __future__ import annotations

from typing import Any

from binary_counter.core.tree import ZERO, BinTree, build_from_digits, increment, iter_digits


class NotANaturalError(ValueError):
    """Raised when a conversion is given something other than an int >= 0."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Expected a natural number (int >= 0), got {value!r}")


def _require_natural(n: Any) -> int:
    # bool is an int subclass but not a natural number here
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise NotANaturalError(n)
    return n


def to_binary(n: int) -> BinTree:
    """Canonical tree denoting *n*.

    Agrees with the primitive-recursive definition
    (to_binary(0) = Zero, to_binary(n+1) = increment(to_binary(n)))
    but reads the bits of *n* directly: O(log n) nodes, no recursion.
    """
    n = _require_natural(n)
    digits: list[int] = []
    while n:
        digits.append(n & 1)
        n >>= 1
    return build_from_digits(digits)


def to_binary_by_increment(n: int) -> BinTree:
    """Reference conversion: apply increment to Zero *n* times.

    O(n log n); kept as the definition to_binary() is checked against.
    """
    n = _require_natural(n)
    result: BinTree = ZERO
    for _ in range(n):
        result = increment(result)
    return result


def to_natural(tree: BinTree) -> int:
    """Interpret *tree* as a number.

      to_natural(Zero)    = 0
      to_natural(Even(n)) = 2 * to_natural(n)
      to_natural(Odd(n))  = 1 + 2 * to_natural(n)
    """
    value = 0
    for digit in reversed(list(iter_digits(tree))):
        value = digit + 2 * value
    return value
