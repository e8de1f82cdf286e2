"""Correctness laws linking trees, naturals, and the normal form.

Each check returns a list of violation messages; empty means the law
holds for the given sample. Checks never raise on a failing law.
"""

from __future__ import annotations

from binary_counter.core.convert import to_binary, to_binary_by_increment, to_natural
from binary_counter.core.normalize import is_canonical, normalize
from binary_counter.core.notation import format_digits
from binary_counter.core.tree import BinTree, Zero, double_tree, increment, structurally_equal


def _show(tree: BinTree) -> str:
    return f'"{format_digits(tree)}"'


def check_round_trip(n: int) -> list[str]:
    """to_natural(to_binary(n)) == n."""
    violations: list[str] = []
    back = to_natural(to_binary(n))
    if back != n:
        violations.append(f"Round trip: to_natural(to_binary({n})) = {back}")
    return violations


def check_conversion_agreement(n: int) -> list[str]:
    """to_binary(n) is canonical and equals n increments applied to Zero."""
    violations: list[str] = []
    direct = to_binary(n)
    stepped = to_binary_by_increment(n)
    if not structurally_equal(direct, stepped):
        violations.append(
            f"to_binary({n}) = {_show(direct)} but {n} increments give {_show(stepped)}"
        )
    if not is_canonical(direct):
        violations.append(f"to_binary({n}) = {_show(direct)} is not canonical")
    return violations


def check_value_preserving(tree: BinTree) -> list[str]:
    """to_natural(normalize(b)) == to_natural(b)."""
    violations: list[str] = []
    before = to_natural(tree)
    after = to_natural(normalize(tree))
    if before != after:
        violations.append(
            f"Tree {_show(tree)}: normalize changed value {before} -> {after}"
        )
    return violations


def check_idempotent(tree: BinTree) -> list[str]:
    """normalize(normalize(b)) == normalize(b)."""
    violations: list[str] = []
    once = normalize(tree)
    twice = normalize(once)
    if not structurally_equal(once, twice):
        violations.append(
            f"Tree {_show(tree)}: normalize not idempotent "
            f"({_show(once)} -> {_show(twice)})"
        )
    return violations


def check_canonical_form(tree: BinTree) -> list[str]:
    """to_binary(to_natural(b)) == normalize(b)."""
    violations: list[str] = []
    via_value = to_binary(to_natural(tree))
    normal = normalize(tree)
    if not structurally_equal(via_value, normal):
        violations.append(
            f"Tree {_show(tree)}: to_binary(to_natural(b)) = {_show(via_value)} "
            f"but normalize(b) = {_show(normal)}"
        )
    return violations


def check_increment_homomorphism(tree: BinTree) -> list[str]:
    """to_natural(increment(b)) == 1 + to_natural(b)."""
    violations: list[str] = []
    value = to_natural(tree)
    succ = to_natural(increment(tree))
    if succ != value + 1:
        violations.append(
            f"Tree {_show(tree)}: increment gives {succ}, expected {value + 1}"
        )
    return violations


def check_doubling(tree: BinTree) -> list[str]:
    """to_natural(double_tree(b)) == 2 * to_natural(b); double_tree(Zero) == Zero."""
    violations: list[str] = []
    value = to_natural(tree)
    doubled = double_tree(tree)
    if to_natural(doubled) != 2 * value:
        violations.append(
            f"Tree {_show(tree)}: double_tree gives {to_natural(doubled)}, "
            f"expected {2 * value}"
        )
    if isinstance(tree, Zero) and not isinstance(doubled, Zero):
        violations.append(f"double_tree(Zero) = {_show(doubled)}, expected Zero")
    if is_canonical(tree) and not is_canonical(doubled):
        violations.append(
            f"Tree {_show(tree)}: double_tree broke canonical form ({_show(doubled)})"
        )
    return violations


def check_naive_inverse(tree: BinTree) -> list[str]:
    """to_binary(to_natural(b)) == b holds exactly when b is canonical.

    The naive inverse law is expected to fail on non-canonical trees;
    a violation here means it failed (or held) for the wrong trees.
    """
    violations: list[str] = []
    holds = structurally_equal(to_binary(to_natural(tree)), tree)
    canonical = is_canonical(tree)
    if holds != canonical:
        violations.append(
            f"Tree {_show(tree)}: naive inverse holds={holds} "
            f"but canonical={canonical}"
        )
    return violations


class LawViolation(Exception):
    """Raised by LawRunner in strict mode when a law fails."""

    def __init__(self, stage: str, violations: list[str]) -> None:
        self.stage = stage
        self.violations = violations
        msg = f"Law violated in {stage}:\n" + "\n".join(violations)
        super().__init__(msg)


def validate_tree(tree: BinTree) -> list[str]:
    """Run all tree-domain law checks."""
    violations: list[str] = []
    violations.extend(check_value_preserving(tree))
    violations.extend(check_idempotent(tree))
    violations.extend(check_canonical_form(tree))
    violations.extend(check_increment_homomorphism(tree))
    violations.extend(check_doubling(tree))
    violations.extend(check_naive_inverse(tree))
    return violations


def validate_natural(n: int) -> list[str]:
    """Run all natural-domain law checks."""
    violations: list[str] = []
    violations.extend(check_round_trip(n))
    violations.extend(check_conversion_agreement(n))
    return violations
