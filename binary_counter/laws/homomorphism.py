"""Homomorphism laws: tree operations track arithmetic on naturals."""

from __future__ import annotations

from binary_counter.core.invariants import check_doubling, check_increment_homomorphism
from binary_counter.core.tree import BinTree


class IncrementLaw:
    """increment corresponds to successor."""

    name = "increment_homomorphism"
    domain = "tree"

    def check(self, sample: BinTree) -> list[str]:
        return check_increment_homomorphism(sample)

    def explain(self) -> str:
        return (
            "to_natural(increment(b)) = 1 + to_natural(b). By induction on b; "
            "the Odd case uses 1 + (1 + 2v) = 2(1 + v), i.e. successor "
            "commutes with the doubling in to_natural."
        )


class DoublingLaw:
    """double_tree corresponds to multiplication by two and keeps canonical form."""

    name = "doubling"
    domain = "tree"

    def check(self, sample: BinTree) -> list[str]:
        return check_doubling(sample)

    def explain(self) -> str:
        return (
            "to_natural(double_tree(b)) = 2 * to_natural(b), double_tree(Zero) = Zero, "
            "and doubling a canonical tree never introduces Even(Zero)."
        )
