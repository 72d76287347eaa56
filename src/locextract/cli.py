"""locextract CLI: Typer application with extract and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from locextract import __version__
from locextract.config.schema import OUTPUT_FORMATS

app = typer.Typer(
    name="locextract",
    help="Extract localizable strings from Objective-C sources.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _setup_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    root = logging.getLogger("locextract")
    root.handlers.clear()
    root.addHandler(
        RichHandler(
            console=console,
            markup=False,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
    )
    root.setLevel(level)


# ── extract ───────────────────────────────────────────────────────────────────


@app.command()
def extract(
    paths: Optional[List[str]] = typer.Argument(None, help="Files to scan (default: whole project)"),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Project root (default: cwd)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .locextract.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | sarif"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Extract localizable strings and report malformed localization calls."""
    from locextract.config.loader import ConfigError, load_config
    from locextract.output import json_report, sarif, terminal
    from locextract.pipeline import extract_project
    from locextract.project import Project
    from locextract.rules.registry import RuleError

    _setup_logging(verbose, debug)
    project_root = Path(root) if root else Path.cwd()

    # --- Load config ---
    try:
        cfg = load_config(project_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    # --- Build project (rules are compiled here) ---
    try:
        project = Project(cfg, project_root)
    except RuleError as exc:
        console.print(f"[bold red]Rule error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose or debug:
        console.print(f"[dim]Project root: {project_root}[/dim]")
        console.print(f"[dim]Lint rules loaded: {len(project.lint_rules)}[/dim]")

    result = extract_project(project, paths or None)

    # --- Output ---
    report_text: Optional[str] = None
    if cfg.output.format == "terminal":
        terminal.render(
            result,
            show_resources=cfg.output.show_resources,
            show_summary=cfg.output.show_summary,
            console=console,
        )
    elif cfg.output.format == "json":
        report_text = json_report.render(
            result, project=project.project_id, source_locale=project.source_locale
        )
        print(report_text)
    elif cfg.output.format == "sarif":
        report_text = sarif.render(result, project.registry.all_rules)
        print(report_text)

    if output:
        if report_text is None:
            # Terminal output has no file form; write JSON instead
            report_text = json_report.render(
                result, project=project.project_id, source_locale=project.source_locale
            )
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    if cfg.scan.fail_on_warnings and result.warnings:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Project root (default: cwd)"),
) -> None:
    """Generate a starter .locextract.toml in the project root."""
    from locextract.config.defaults import DEFAULT_TOML
    from locextract.config.loader import CONFIG_FILENAME

    project_root = Path(root) if root else Path.cwd()
    config_path = project_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"locextract {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """locextract: extract localizable strings from Objective-C sources."""
