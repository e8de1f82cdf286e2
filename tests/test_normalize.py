"""Tests for the normalizer and canonical form."""

from __future__ import annotations

import pytest

from binary_counter.analysis.samples import enumerate_trees
from binary_counter.core.convert import to_binary, to_natural
from binary_counter.core.normalize import is_canonical, normalize, same_value
from binary_counter.core.tree import (
    ZERO,
    BinTree,
    Even,
    Odd,
    build_from_digits,
    iter_digits,
    structurally_equal,
)

ALL_TREES_DEPTH_6 = list(enumerate_trees(6))


class TestScenarios:
    def test_even_zero(self, even_zero: BinTree) -> None:
        assert normalize(even_zero) == ZERO

    def test_padded_one(self, padded_one: BinTree) -> None:
        assert normalize(padded_one) == Odd(tail=ZERO)

    def test_padded_five(self, padded_five: BinTree, five: BinTree) -> None:
        assert normalize(padded_five) == five

    def test_zero(self) -> None:
        assert normalize(ZERO) == ZERO

    def test_canonical_unchanged(self, five: BinTree) -> None:
        assert normalize(five) == five

    def test_inner_zeros_kept(self) -> None:
        # "0001" is 8: low zeros are significant
        eight = build_from_digits([0, 0, 0, 1])
        assert normalize(eight) == eight

    def test_even_chain_collapses(self) -> None:
        chain = build_from_digits([0] * 4000)
        assert normalize(chain) == ZERO

    def test_deep_tree_no_recursion_limit(self) -> None:
        tree = build_from_digits([1] + [0] * 5000)
        assert list(iter_digits(normalize(tree))) == [1]


class TestIsCanonical:
    def test_canonical(self, five: BinTree) -> None:
        assert is_canonical(five)
        assert is_canonical(ZERO)

    def test_non_canonical(self, even_zero: BinTree, padded_one: BinTree) -> None:
        assert not is_canonical(even_zero)
        assert not is_canonical(padded_one)

    def test_canonical_iff_top_digit_is_odd(self) -> None:
        for tree in ALL_TREES_DEPTH_6:
            digits = list(iter_digits(tree))
            expected = not digits or digits[-1] == 1
            assert is_canonical(tree) == expected, str(tree)


class TestSameValue:
    def test_zero_and_even_zero(self, even_zero: BinTree) -> None:
        assert same_value(ZERO, even_zero)

    def test_different(self, five: BinTree) -> None:
        assert not same_value(five, ZERO)


class TestLaws:
    @pytest.mark.parametrize("tree", ALL_TREES_DEPTH_6, ids=str)
    def test_value_preserving(self, tree: BinTree) -> None:
        assert to_natural(normalize(tree)) == to_natural(tree)

    @pytest.mark.parametrize("tree", ALL_TREES_DEPTH_6, ids=str)
    def test_idempotent(self, tree: BinTree) -> None:
        once = normalize(tree)
        assert normalize(once) == once

    @pytest.mark.parametrize("tree", ALL_TREES_DEPTH_6, ids=str)
    def test_canonical_form_theorem(self, tree: BinTree) -> None:
        assert to_binary(to_natural(tree)) == normalize(tree)

    def test_naive_inverse_fails_on_non_canonical(self, padded_one: BinTree) -> None:
        assert to_binary(to_natural(padded_one)) != padded_one

    def test_naive_inverse_fails_exactly_on_non_canonical(self) -> None:
        for tree in ALL_TREES_DEPTH_6:
            holds = structurally_equal(to_binary(to_natural(tree)), tree)
            assert holds == is_canonical(tree)

    def test_doubling_preserves_canonical(self) -> None:
        from binary_counter.core.tree import double_tree

        for tree in ALL_TREES_DEPTH_6:
            if is_canonical(tree):
                assert is_canonical(double_tree(tree))

    def test_normal_forms_are_distinct_per_value(self) -> None:
        by_value: dict[int, BinTree] = {}
        for tree in ALL_TREES_DEPTH_6:
            value = to_natural(tree)
            normal = normalize(tree)
            if value in by_value:
                assert by_value[value] == normal
            else:
                by_value[value] = normal
        assert sorted(by_value) == list(range(2**6))

    def test_even_on_non_canonical_tail(self) -> None:
        # Even(Even(Zero)) normalizes via double_tree(Zero) = Zero
        assert normalize(Even(tail=Even(tail=ZERO))) == ZERO
