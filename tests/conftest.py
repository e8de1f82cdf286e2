"""Shared fixtures for binary-counter tests."""

from __future__ import annotations

import pytest

from binary_counter.core.config import CheckConfig
from binary_counter.core.tree import ZERO, BinTree, Even, Odd


@pytest.fixture
def five() -> BinTree:
    """Canonical 5: Odd(Even(Odd(Zero)))."""
    return Odd(tail=Even(tail=Odd(tail=ZERO)))


@pytest.fixture
def even_zero() -> BinTree:
    """Non-canonical 0: Even(Zero)."""
    return Even(tail=ZERO)


@pytest.fixture
def padded_one() -> BinTree:
    """Non-canonical 1 with a redundant high zero: Odd(Even(Zero))."""
    return Odd(tail=Even(tail=ZERO))


@pytest.fixture
def padded_five() -> BinTree:
    """Non-canonical 5 with two redundant high zeros: "10100"."""
    return Odd(tail=Even(tail=Odd(tail=Even(tail=Even(tail=ZERO)))))


@pytest.fixture
def small_config() -> CheckConfig:
    return CheckConfig(max_n=40, max_depth=5, random_samples=30, random_max_depth=24, seed=7)
