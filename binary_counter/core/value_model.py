"""ValueModel: symbolic interpretation of a tree.

This is one of two places where SymPy is allowed (the other is reports/).
The expression mirrors to_natural() step by step, left unevaluated so
reports can show how a tree denotes its number.

Printing always uses order="none": the default printers re-sort terms at
every nesting level, which is exponential in the tree depth. SymPy's
printers and doit() also recurse per level, so symbolic forms are only
built for trees of at most MAX_SYMBOLIC_DEPTH digits.
"""

from __future__ import annotations

import sympy as sp

from binary_counter.core.tree import BinTree, depth, iter_digits

MAX_SYMBOLIC_DEPTH = 64


class SymbolicDepthError(ValueError):
    """Raised when a tree is too deep for a symbolic interpretation."""

    def __init__(self, tree_depth: int) -> None:
        self.depth = tree_depth
        super().__init__(
            f"Tree has {tree_depth} digits; symbolic forms are limited to "
            f"{MAX_SYMBOLIC_DEPTH}"
        )


def has_symbolic_form(tree: BinTree) -> bool:
    return depth(tree) <= MAX_SYMBOLIC_DEPTH


def symbolic_value(tree: BinTree) -> sp.Expr:
    """Unevaluated SymPy expression of the structural interpretation.

    Zero -> 0, Even(n) -> 0 + 2*v(n), Odd(n) -> 1 + 2*v(n).
    Raises SymbolicDepthError above MAX_SYMBOLIC_DEPTH digits.
    """
    digits = list(iter_digits(tree))
    if len(digits) > MAX_SYMBOLIC_DEPTH:
        raise SymbolicDepthError(len(digits))
    expr: sp.Expr = sp.Integer(0)
    for digit in reversed(digits):
        doubled = sp.Mul(sp.Integer(2), expr, evaluate=False)
        expr = sp.Add(sp.Integer(digit), doubled, evaluate=False)
    return expr


def evaluate(expr: sp.Expr) -> int:
    """Collapse a symbolic value back to an int."""
    result = expr.doit()
    if not result.is_Integer:
        raise ValueError(
            f"Expression does not evaluate to an integer: {sp.sstr(expr, order='none')}"
        )
    return int(result)


def to_text(tree: BinTree) -> str:
    """Plain-text form of the unevaluated interpretation, in digit order."""
    return sp.sstr(symbolic_value(tree), order="none")


def to_latex(tree: BinTree) -> str:
    """LaTeX of the unevaluated interpretation."""
    return sp.latex(symbolic_value(tree), order="none")
