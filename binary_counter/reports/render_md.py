"""Markdown report generator."""

from __future__ import annotations

from binary_counter.core.convert import to_natural
from binary_counter.core.normalize import is_canonical, normalize
from binary_counter.core.notation import format_digits, format_natural
from binary_counter.core.tree import BinTree, depth
from binary_counter.core.value_model import (
    MAX_SYMBOLIC_DEPTH,
    has_symbolic_form,
    to_text,
)


def render_tree_report(tree: BinTree) -> str:
    """Render a Markdown summary of *tree*."""
    normal = normalize(tree)
    lines: list[str] = []

    lines.append("# Binary counter tree")
    lines.append("")
    lines.append(f"**Digits (LSB first):** `{format_digits(tree) or '(empty)'}`")
    lines.append(f"**Constructors:** `{tree}`")
    lines.append(f"**Depth:** {depth(tree)}")
    lines.append(f"**Value:** {format_natural(to_natural(tree))}")
    lines.append("")

    lines.append("## Interpretation")
    lines.append("")
    if has_symbolic_form(tree):
        lines.append(f"    {to_text(tree)}")
    else:
        lines.append(
            f"(interpretation omitted: {depth(tree)} digits exceeds {MAX_SYMBOLIC_DEPTH})"
        )
    lines.append("")

    lines.append("## Normal form")
    lines.append("")
    if is_canonical(tree):
        lines.append("Canonical: normalize leaves this tree unchanged.")
    else:
        dropped = depth(tree) - depth(normal)
        lines.append(
            f"Not canonical: {dropped} redundant high zero digit(s). "
            f"Normal form is `{normal}` "
            f"(digits `{format_digits(normal) or '(empty)'}`)."
        )
        lines.append("")
        lines.append(
            "Structural equality with this tree is not value equality; "
            "compare normal forms or values instead."
        )
    lines.append("")
    return "\n".join(lines)
