"""Laws about the normalizer."""

from __future__ import annotations

from binary_counter.core.invariants import (
    check_idempotent,
    check_naive_inverse,
    check_value_preserving,
)
from binary_counter.core.tree import BinTree


class ValuePreservingLaw:
    """Normalizing a tree never changes the number it denotes."""

    name = "value_preserving"
    domain = "tree"

    def check(self, sample: BinTree) -> list[str]:
        return check_value_preserving(sample)

    def explain(self) -> str:
        return "to_natural(normalize(b)) = to_natural(b): normalizing never changes the number."


class IdempotenceLaw:
    """A normalized tree is already in normal form."""

    name = "idempotence"
    domain = "tree"

    def check(self, sample: BinTree) -> list[str]:
        return check_idempotent(sample)

    def explain(self) -> str:
        return "normalize(normalize(b)) = normalize(b): normal forms are fixed points."


class NaiveInverseLaw:
    """Characterizes where to_binary(to_natural(b)) == b fails.

    The naive inverse is not a law of this representation. What holds is
    that it fails exactly on the non-canonical trees.
    """

    name = "naive_inverse_characterization"
    domain = "tree"

    def check(self, sample: BinTree) -> list[str]:
        return check_naive_inverse(sample)

    def explain(self) -> str:
        return (
            "to_binary(to_natural(b)) = b holds iff b is canonical. On e.g. "
            "Even(Zero) it fails, which is expected: the encoding has redundant "
            "trees and re-encoding returns the canonical one."
        )
