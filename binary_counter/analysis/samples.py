"""Sample generators for law checking.

Exhaustive enumeration covers every raw tree (canonical or not) up to a
depth; seeded random trees reach deeper without the 2^depth blow-up.
"""

from __future__ import annotations

import random
from typing import Iterator

from binary_counter.core.tree import ZERO, BinTree, Even, Odd, build_from_digits


def enumerate_trees(max_depth: int) -> Iterator[BinTree]:
    """Yield every tree with at most *max_depth* digit nodes, shallowest first.

    There are 2^(max_depth + 1) - 1 such trees.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    level: list[BinTree] = [ZERO]
    yield ZERO
    for _ in range(max_depth):
        # Prepending a low digit to every tree of the previous level
        level = [cls(tail=t) for t in level for cls in (Even, Odd)]
        yield from level


def random_trees(count: int, max_depth: int, seed: int = 0) -> Iterator[BinTree]:
    """Yield *count* pseudo-random trees of 0..max_depth digits.

    Deterministic for a given seed.
    """
    rng = random.Random(seed)
    for _ in range(count):
        n_digits = rng.randint(0, max_depth)
        yield build_from_digits(rng.randint(0, 1) for _ in range(n_digits))


def natural_range(max_n: int) -> range:
    """Naturals 0..max_n inclusive."""
    return range(max_n + 1)
