"""Tests for sample generators."""

from __future__ import annotations

import pytest

from binary_counter.analysis.samples import enumerate_trees, natural_range, random_trees
from binary_counter.core.notation import format_digits
from binary_counter.core.tree import ZERO, depth


class TestEnumerateTrees:
    @pytest.mark.parametrize("max_depth", [0, 1, 2, 5, 8])
    def test_count(self, max_depth: int) -> None:
        assert len(list(enumerate_trees(max_depth))) == 2 ** (max_depth + 1) - 1

    def test_all_distinct(self) -> None:
        digits = [format_digits(t) for t in enumerate_trees(6)]
        assert len(digits) == len(set(digits))

    def test_shallowest_first(self) -> None:
        depths = [depth(t) for t in enumerate_trees(4)]
        assert depths == sorted(depths)

    def test_zero_first(self) -> None:
        assert next(enumerate_trees(3)) == ZERO

    def test_negative_depth(self) -> None:
        with pytest.raises(ValueError):
            list(enumerate_trees(-1))


class TestRandomTrees:
    def test_count_and_depth_bound(self) -> None:
        trees = list(random_trees(50, max_depth=12, seed=3))
        assert len(trees) == 50
        assert all(depth(t) <= 12 for t in trees)

    def test_deterministic(self) -> None:
        a = [format_digits(t) for t in random_trees(20, 30, seed=11)]
        b = [format_digits(t) for t in random_trees(20, 30, seed=11)]
        assert a == b

    def test_seed_matters(self) -> None:
        a = [format_digits(t) for t in random_trees(20, 30, seed=1)]
        b = [format_digits(t) for t in random_trees(20, 30, seed=2)]
        assert a != b


class TestNaturalRange:
    def test_inclusive(self) -> None:
        assert list(natural_range(3)) == [0, 1, 2, 3]
