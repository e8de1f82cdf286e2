"""CLI entry point using Typer.

Trees are written in digit notation, least-significant first ("101" is 5).
Zero is the empty string; "-" is accepted and printed in its place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from binary_counter.core.notation import DigitNotationError, format_digits, parse_digits
from binary_counter.core.tree import BinTree

app = typer.Typer(name="bincount", help="Little-endian binary counter trees")

ZERO_MARK = "-"


def _parse(digits: str) -> BinTree:
    if digits == ZERO_MARK:
        digits = ""
    try:
        return parse_digits(digits)
    except DigitNotationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


def _show(tree: BinTree) -> str:
    return format_digits(tree) or ZERO_MARK


@app.command("to-binary")
def to_binary_cmd(
    n: int = typer.Argument(..., help="Natural number to encode"),
    json_output: bool = typer.Option(False, "--json", help="Output as a JSON envelope"),
) -> None:
    """Encode a natural number as its canonical tree."""
    from binary_counter.core.convert import NotANaturalError, to_binary

    try:
        tree = to_binary(n)
    except NotANaturalError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    if json_output:
        from binary_counter.core.serialize import tree_to_json

        typer.echo(tree_to_json(tree))
    else:
        typer.echo(_show(tree))


@app.command("to-natural")
def to_natural_cmd(
    digits: str = typer.Argument(..., help="Tree in digit notation"),
) -> None:
    """Interpret a tree as a natural number."""
    from binary_counter.core.convert import to_natural
    from binary_counter.core.notation import format_natural

    typer.echo(format_natural(to_natural(_parse(digits))))


@app.command("increment")
def increment_cmd(
    digits: str = typer.Argument(..., help="Tree in digit notation"),
    times: int = typer.Option(1, "--times", "-n", min=0, help="Number of increments"),
) -> None:
    """Apply the increment transition."""
    from binary_counter.core.tree import increment

    tree = _parse(digits)
    for _ in range(times):
        tree = increment(tree)
    typer.echo(_show(tree))


@app.command("normalize")
def normalize_cmd(
    digits: str = typer.Argument(..., help="Tree in digit notation"),
) -> None:
    """Reduce a tree to its canonical form."""
    from binary_counter.core.normalize import normalize

    typer.echo(_show(normalize(_parse(digits))))


@app.command("explain")
def explain_cmd(
    digits: str = typer.Argument(..., help="Tree in digit notation"),
    tex: bool = typer.Option(False, "--tex", help="Output a LaTeX fragment instead of Markdown"),
) -> None:
    """Show how a tree denotes its number and whether it is canonical."""
    tree = _parse(digits)
    if tex:
        from binary_counter.reports.render_tex import render_tree_tex

        typer.echo(render_tree_tex(tree))
    else:
        from binary_counter.reports.render_md import render_tree_report

        typer.echo(render_tree_report(tree))


@app.command("check-laws")
def check_laws_cmd(
    max_n: int = typer.Option(256, "--max-n", help="Check naturals 0..max-n"),
    max_depth: int = typer.Option(8, "--max-depth", help="Enumerate every tree up to this depth"),
    samples: int = typer.Option(200, "--samples", help="Number of random trees"),
    random_max_depth: int = typer.Option(64, "--random-max-depth", help="Depth bound for random trees"),
    seed: int = typer.Option(0, help="Random seed"),
    strict: bool = typer.Option(False, "--strict", help="Stop at the first violated law"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    output: Optional[Path] = typer.Option(None, "--out", help="Also write JSON to this path"),
) -> None:
    """Check every correctness law over exhaustive and random samples."""
    import json

    from pydantic import ValidationError

    from binary_counter.core.config import CheckConfig
    from binary_counter.core.invariants import LawViolation
    from binary_counter.pipelines.law_runner import LawRunner
    from binary_counter.reports.render_check import (
        check_to_json,
        export_check_json,
        render_check_table,
    )

    try:
        config = CheckConfig(
            max_n=max_n,
            max_depth=max_depth,
            random_samples=samples,
            random_max_depth=random_max_depth,
            seed=seed,
            strict=strict,
        )
    except ValidationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    try:
        result = LawRunner(config).run()
    except LawViolation as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    data = check_to_json(result)
    if json_output:
        typer.echo(json.dumps(data, indent=2))
    else:
        render_check_table(result)

    if output is not None:
        export_check_json(data, output)
        typer.echo(f"Written to {output}")

    if not result.passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
