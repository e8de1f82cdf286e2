"""Rich tables and JSON export for law-check output."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from binary_counter.core.serialize import export_dict
from binary_counter.pipelines.law_runner import LawCheckResult

# Violations shown per failing law before truncating
MAX_SHOWN_VIOLATIONS = 5


def render_check_table(result: LawCheckResult, console: Console | None = None) -> None:
    """Print a Rich table with one row per law."""
    if console is None:
        console = Console()

    cfg = result.config
    console.print("\n[bold]Law check[/bold]")
    console.print(
        f"naturals 0..{cfg.max_n}   trees depth <= {cfg.max_depth}   "
        f"random {cfg.random_samples} (depth <= {cfg.random_max_depth}, seed {cfg.seed})\n"
    )

    table = Table(title="Correctness laws")
    table.add_column("Law")
    table.add_column("Domain", style="dim")
    table.add_column("Samples", justify="right")
    table.add_column("Violations", justify="right")
    table.add_column("Status")

    for stage in result.stages:
        style = "green" if stage.passed else "bold red"
        table.add_row(
            stage.name,
            stage.domain,
            str(stage.samples),
            str(len(stage.violations)),
            "PASS" if stage.passed else "FAIL",
            style=style,
        )

    console.print(table)

    for stage in result.failed_stages():
        console.print(f"\n[bold red]{stage.name}[/bold red]")
        for msg in stage.violations[:MAX_SHOWN_VIOLATIONS]:
            console.print(f"  {msg}")
        hidden = len(stage.violations) - MAX_SHOWN_VIOLATIONS
        if hidden > 0:
            console.print(f"  [dim]... {hidden} more[/dim]")

    if result.passed:
        console.print(f"\n[green]All laws hold on {result.total_samples} samples.[/green]")
    else:
        console.print(f"\n[red]{result.total_violations} violations.[/red]")


def check_to_json(result: LawCheckResult) -> dict:
    """Convert LawCheckResult to a JSON-serializable dict."""
    return {
        "passed": result.passed,
        "total_samples": result.total_samples,
        "total_violations": result.total_violations,
        "config": result.config.model_dump(mode="json"),
        "stages": [
            {
                "name": s.name,
                "domain": s.domain,
                "samples": s.samples,
                "passed": s.passed,
                "violations": list(s.violations),
            }
            for s in result.stages
        ],
    }


def export_check_json(data: dict, path: Path) -> None:
    """Write law-check JSON to *path*."""
    export_dict(data, path)
