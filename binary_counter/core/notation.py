"""Compact digit-string notation for trees.

One character per digit node, least-significant first: '0' for Even,
'1' for Odd. The terminating Zero is not written, so Zero is "" and
Odd(Even(Odd(Zero))) is "101". The notation is exact: "10" is the
non-canonical Odd(Even(Zero)), not 1.
"""

from __future__ import annotations

from binary_counter.core.tree import BinTree, build_from_digits, iter_digits

_SEPARATORS = frozenset(" \t\n_")

# str(int) refuses values above 4300 decimal digits; format in blocks below that.
_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


class DigitNotationError(ValueError):
    """Raised when a digit string contains something other than 0/1."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(
            f"Invalid digit {text[position]!r} at position {position} in {text!r} "
            f"(expected '0' or '1', least-significant first)"
        )


def format_digits(tree: BinTree) -> str:
    """Render *tree* in digit notation."""
    return "".join(str(d) for d in iter_digits(tree))


def format_natural(n: int) -> str:
    """Decimal string of a natural number of any size."""
    if n < _CHUNK:
        return str(n)
    chunks: list[int] = []
    while n:
        n, rest = divmod(n, _CHUNK)
        chunks.append(rest)
    head = str(chunks.pop())
    return head + "".join(f"{c:0{_CHUNK_DIGITS}d}" for c in reversed(chunks))


def parse_digits(text: str) -> BinTree:
    """Parse digit notation into the exact tree it spells.

    Whitespace and '_' separators are ignored.
    """
    digits: list[int] = []
    for i, ch in enumerate(text):
        if ch in _SEPARATORS:
            continue
        if ch == "0":
            digits.append(0)
        elif ch == "1":
            digits.append(1)
        else:
            raise DigitNotationError(text, i)
    return build_from_digits(digits)
