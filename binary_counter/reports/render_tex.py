"""LaTeX fragment generator (optional)."""

from __future__ import annotations

from binary_counter.core.convert import to_natural
from binary_counter.core.normalize import normalize
from binary_counter.core.notation import format_natural
from binary_counter.core.tree import BinTree, depth, iter_digits
from binary_counter.core.value_model import (
    MAX_SYMBOLIC_DEPTH,
    has_symbolic_form,
    to_latex,
)


def _constructors_tex(tree: BinTree) -> str:
    digits = list(iter_digits(tree))
    heads = "".join(r"\mathsf{Odd}(" if d else r"\mathsf{Even}(" for d in digits)
    return heads + r"\mathsf{Zero}" + ")" * len(digits)


def render_tree_tex(tree: BinTree) -> str:
    """Render *tree* and its interpretation as an align* block.

    The unevaluated interpretation line is left out above
    MAX_SYMBOLIC_DEPTH digits; the value line is always present.
    """
    lines: list[str] = []
    lines.append(r"\begin{align*}")
    lines.append(f"b &= {_constructors_tex(tree)} \\\\")
    if has_symbolic_form(tree):
        lines.append(f"\\mathrm{{toNatural}}(b) &= {to_latex(tree)} \\\\")
        lines.append(f"&= {format_natural(to_natural(tree))} \\\\")
    else:
        lines.append(
            f"% interpretation omitted: {depth(tree)} digits exceeds {MAX_SYMBOLIC_DEPTH}"
        )
        lines.append(f"\\mathrm{{toNatural}}(b) &= {format_natural(to_natural(tree))} \\\\")
    lines.append(f"\\mathrm{{normalize}}(b) &= {_constructors_tex(normalize(tree))}")
    lines.append(r"\end{align*}")
    return "\n".join(lines)
