"""Normalizer: reduce any tree to the canonical tree of the same value.

Canonical form is defined by this module, not by a separate predicate:
a tree is canonical iff normalize() leaves it unchanged.

  normalize(Zero)    = Zero
  normalize(Even(n)) = double_tree(normalize(n))
  normalize(Odd(n))  = Odd(normalize(n))

One bottom-up pass. Each digit is visited once and only the already
normalized suffix is consulted; trailing zero runs are never scanned for.
"""

from __future__ import annotations

from binary_counter.core.convert import to_natural
from binary_counter.core.tree import ZERO, BinTree, Odd, double_tree, iter_digits, structurally_equal


def normalize(tree: BinTree) -> BinTree:
    """Return the canonical tree denoting the same number as *tree*."""
    result: BinTree = ZERO
    for digit in reversed(list(iter_digits(tree))):
        result = Odd(tail=result) if digit else double_tree(result)
    return result


def is_canonical(tree: BinTree) -> bool:
    """True iff *tree* is already in normal form."""
    return structurally_equal(normalize(tree), tree)


def same_value(a: BinTree, b: BinTree) -> bool:
    """Value equality. Raw ``a == b`` is unsound for this (Zero != Even(Zero))."""
    return to_natural(a) == to_natural(b)
