"""Tests for to_binary / to_natural."""

from __future__ import annotations

import pytest

from binary_counter.core.convert import (
    NotANaturalError,
    to_binary,
    to_binary_by_increment,
    to_natural,
)
from binary_counter.core.normalize import is_canonical
from binary_counter.core.tree import ZERO, BinTree, Even, Odd, build_from_digits, iter_digits


class TestToBinary:
    def test_zero(self) -> None:
        assert to_binary(0) == ZERO

    def test_five(self, five: BinTree) -> None:
        assert to_binary(5) == five

    def test_powers_of_two(self) -> None:
        assert list(iter_digits(to_binary(8))) == [0, 0, 0, 1]

    def test_large(self) -> None:
        n = 2**200 + 12345
        assert to_natural(to_binary(n)) == n

    @pytest.mark.parametrize("n", range(0, 300))
    def test_agrees_with_increment_chain(self, n: int) -> None:
        assert to_binary(n) == to_binary_by_increment(n)

    @pytest.mark.parametrize("n", range(0, 64))
    def test_always_canonical(self, n: int) -> None:
        assert is_canonical(to_binary(n))

    @pytest.mark.parametrize("bad", [-1, 1.5, "3", None, True])
    def test_rejects_non_naturals(self, bad: object) -> None:
        with pytest.raises(NotANaturalError):
            to_binary(bad)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="natural number"):
            to_binary_by_increment(-4)


class TestToNatural:
    def test_zero(self) -> None:
        assert to_natural(ZERO) == 0

    def test_five(self, five: BinTree) -> None:
        assert to_natural(five) == 5

    def test_even_zero(self, even_zero: BinTree) -> None:
        assert to_natural(even_zero) == 0

    def test_redundant_high_zeros_ignored(self, padded_five: BinTree) -> None:
        assert to_natural(padded_five) == 5

    def test_equations(self, five: BinTree) -> None:
        assert to_natural(Even(tail=five)) == 2 * 5
        assert to_natural(Odd(tail=five)) == 1 + 2 * 5

    def test_deep_tree(self) -> None:
        tree = build_from_digits([0] * 5000 + [1])
        assert to_natural(tree) == 2**5000


class TestRoundTrip:
    @pytest.mark.parametrize("n", [0, 1, 2, 3, 7, 8, 255, 256, 1023, 10**6])
    def test_natural_round_trip(self, n: int) -> None:
        assert to_natural(to_binary(n)) == n
