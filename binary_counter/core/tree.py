"""Little-endian binary digit trees and the increment transition.

Grammar:
  tree := Zero | Even(tree) | Odd(tree)

Digits are read least-significant first: Even(t) prepends a low-order 0
bit to t, Odd(t) prepends a low-order 1 bit. The encoding is not
canonical (Zero and Even(Zero) both denote 0); see core/normalize.py.

All nodes are frozen Pydantic models. Every operation returns a new tree.
Walks over a tree are iterative (descent, then a bottom-up fold) so that
deep non-canonical trees never hit the interpreter recursion limit.
"""

from __future__ import annotations

from typing import Annotated, Iterable, Iterator, Literal, Union

from pydantic import BaseModel, Discriminator, Tag


class TreeNode(BaseModel):
    """Common base for tree nodes.

    Equality, hashing and repr walk the digits iteratively; the pydantic
    defaults recurse once per node and fail on deep trees.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return structurally_equal(self, other)

    def __hash__(self) -> int:
        return hash(tuple(iter_digits(self)))

    def __repr__(self) -> str:
        return render_constructors(self)

    def __str__(self) -> str:
        return render_constructors(self)


class Zero(TreeNode):
    """The empty digit string, denoting 0."""

    model_config = {"frozen": True, "extra": "forbid"}
    tag: Literal["zero"] = "zero"


class Even(TreeNode):
    """A low-order 0 bit in front of *tail*."""

    model_config = {"frozen": True, "extra": "forbid"}
    tag: Literal["even"] = "even"
    tail: BinTree


class Odd(TreeNode):
    """A low-order 1 bit in front of *tail*."""

    model_config = {"frozen": True, "extra": "forbid"}
    tag: Literal["odd"] = "odd"
    tail: BinTree


# Discriminated union type for all trees
BinTree = Annotated[
    Union[
        Annotated[Zero, Tag("zero")],
        Annotated[Even, Tag("even")],
        Annotated[Odd, Tag("odd")],
    ],
    Discriminator("tag"),
]

# Rebuild models now that BinTree is defined (forward references)
Even.model_rebuild()
Odd.model_rebuild()

ZERO = Zero()


# ---- Helpers ----

def zero() -> Zero:
    """Shorthand constructor for Zero."""
    return ZERO


def even(tail: BinTree) -> Even:
    """Shorthand constructor for Even."""
    return Even(tail=tail)


def odd(tail: BinTree) -> Odd:
    """Shorthand constructor for Odd."""
    return Odd(tail=tail)


def iter_digits(tree: BinTree) -> Iterator[int]:
    """Yield the digits of *tree* least-significant first (0 for Even, 1 for Odd)."""
    node = tree
    while not isinstance(node, Zero):
        yield 1 if isinstance(node, Odd) else 0
        node = node.tail


def depth(tree: BinTree) -> int:
    """Number of digit nodes above the terminating Zero."""
    return sum(1 for _ in iter_digits(tree))


def build_from_digits(digits: Iterable[int]) -> BinTree:
    """Build the exact tree spelled by *digits* (least-significant first).

    No normalization: trailing high zeros become Even nodes above Zero.
    """
    result: BinTree = ZERO
    for digit in reversed(list(digits)):
        result = Odd(tail=result) if digit else Even(tail=result)
    return result


def structurally_equal(a: BinTree, b: BinTree) -> bool:
    """Syntactic tree equality, computed without recursion.

    Backs ``TreeNode.__eq__``, so ``a == b`` is safe at any depth. Note
    this is NOT value equality: Zero and Even(Zero) differ structurally.
    Use same_value() or normalize() first.
    """
    return list(iter_digits(a)) == list(iter_digits(b))


def render_constructors(tree: BinTree) -> str:
    """Constructor form, e.g. ``Odd(Even(Odd(Zero)))``."""
    digits = list(iter_digits(tree))
    heads = "".join("Odd(" if d else "Even(" for d in digits)
    return heads + "Zero" + ")" * len(digits)


# ---- Transitions ----

def increment(tree: BinTree) -> BinTree:
    """Successor on trees.

      increment(Zero)    = Odd(Zero)
      increment(Even(n)) = Odd(n)
      increment(Odd(n))  = Even(increment(n))

    The carry runs through the leading Odd digits; each becomes Even
    once the first Even (or the terminating Zero) absorbs the carry.
    """
    carries = 0
    node = tree
    while isinstance(node, Odd):
        carries += 1
        node = node.tail

    if isinstance(node, Even):
        result: BinTree = Odd(tail=node.tail)
    else:
        result = Odd(tail=ZERO)

    for _ in range(carries):
        result = Even(tail=result)
    return result


def double_tree(tree: BinTree) -> BinTree:
    """Multiply by two without ever producing Even(Zero).

      double_tree(Zero) = Zero
      double_tree(b)    = Even(b)   for b != Zero

    Doubling a canonical tree yields a canonical tree.
    """
    if isinstance(tree, Zero):
        return ZERO
    return Even(tail=tree)
