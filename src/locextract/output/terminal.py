"""Rich terminal reporter: resource and warning tables."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from locextract.resources.models import ExtractResult


def render(
    result: ExtractResult,
    *,
    show_resources: bool = True,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print extraction results to the terminal using Rich."""
    console = console or Console(stderr=True)

    if show_resources and result.resources:
        console.print()
        table = Table(
            title="Localizable Strings",
            show_lines=False,
            title_style="bold",
            border_style="dim",
        )
        table.add_column("#", justify="right", style="green")
        table.add_column("Key", style="cyan", min_width=20)
        table.add_column("Comment", style="dim")
        table.add_column("File", style="magenta")
        for r in result.resources:
            table.add_row(str(r.index), r.key, r.comment or "", r.path_name)
        console.print(table)

    if result.warnings:
        console.print()
        wtable = Table(
            title="Malformed Calls",
            show_lines=True,
            title_style="bold yellow",
            border_style="dim",
        )
        wtable.add_column("Rule", style="yellow", min_width=20)
        wtable.add_column("File", style="magenta")
        wtable.add_column("Line", justify="right", style="green")
        wtable.add_column("Match")
        for w in result.warnings:
            wtable.add_row(w.rule_id, w.path_name or "-", str(w.line_no), w.matched_text.strip())
        console.print(wtable)

    if not result.resources and not result.warnings:
        console.print()
        console.print("[dim]No localizable strings found.[/dim]")

    if show_summary:
        _print_summary(console, result)


def _print_summary(console: Console, result: ExtractResult) -> None:
    console.print()
    console.print(f"[dim]Files scanned:[/dim]  {result.scanned_files}")
    console.print(f"[dim]Resources:[/dim]      {result.total_resources}")
    console.print(f"[dim]Warnings:[/dim]       {result.total_warnings}")
    console.print(f"[dim]Skipped:[/dim]        {len(result.skipped_files)}")
    console.print(f"[dim]Duration:[/dim]       {result.scan_duration_ms:.0f}ms")
