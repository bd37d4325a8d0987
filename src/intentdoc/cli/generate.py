"""
CLI: ``intentdoc generate`` and ``intentdoc list``.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from intentdoc.cli.utils import console, err_console, importable_project, make_settings, print_entries
from intentdoc.core.errors import ArtifactWriteError, UnknownFormatError
from intentdoc.generator import IntentDocGenerator
from intentdoc.loader import LoadReport


def _report_failures(report: LoadReport) -> None:
    for error in report.failed:
        source = escape(str(error.context.get("source")))
        err_console.print(f"[yellow]Skipped[/yellow] {source}: {escape(str(error.cause))}")


def generate(
    format: str = typer.Option(
        "json", "--format", "-f",
        help="Output format for --output: json, markdown, html (or data-interchange, formatted-text, browsable-page)",
    ),
    output: str = typer.Option(
        "", "--output", "-o",
        help="Output file path. Empty writes api-doc.json and index.html to the docs directory.",
    ),
    module: list[str] | None = typer.Option(  # noqa: UP007
        None, "--module", "-m", help="Route module or package to load (repeatable)"
    ),
    project_root: Path | None = typer.Option(  # noqa: UP007
        None, "--project-root", help="Project root (default: detected)"
    ),
) -> None:
    """Generate API documentation from intent definitions."""
    settings = make_settings(module, project_root)
    generator = IntentDocGenerator(settings=settings)

    console.print("Loading routes to collect intent documentation...")
    try:
        with importable_project(settings):
            result = generator.generate(output=output or None, format=format)
    except UnknownFormatError as e:
        err_console.print(f"[bold red]Error[/bold red]: {escape(e.message)}")
        raise typer.Exit(code=2) from e
    except ArtifactWriteError as e:
        err_console.print(
            f"[bold red]Error[/bold red] ({e.category.value}): {escape(e.message)}: {escape(str(e.cause))}"
        )
        raise typer.Exit(code=1) from e

    _report_failures(result.load_report)

    if not result.success:
        console.print(
            "[yellow]No intent documentation found. "
            "Make sure your routes use .intent()[/yellow]"
        )
        raise typer.Exit(code=1)

    console.print(f"Found {result.entry_count} documented endpoints")
    for path in result.artifacts:
        console.print(f"[green]✓[/green] Generated: {escape(str(path))}", soft_wrap=True)

    if not output:
        console.print("\n[bold green]Documentation generated successfully![/bold green]")
        console.print(f"  Open {result.artifacts[-1]} in your browser to view the documentation.", soft_wrap=True)


def list_entries(
    module: list[str] | None = typer.Option(  # noqa: UP007
        None, "--module", "-m", help="Route module or package to load (repeatable)"
    ),
    project_root: Path | None = typer.Option(  # noqa: UP007
        None, "--project-root", help="Project root (default: detected)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print entries as JSON"),
) -> None:
    """List documented endpoints."""
    settings = make_settings(module, project_root)
    generator = IntentDocGenerator(settings=settings)
    with importable_project(settings):
        entries = generator.collect()
    _report_failures(generator.last_load_report)

    if as_json:
        console.print_json(json.dumps(entries, default=str))
        return

    if not entries:
        console.print("[dim]No documented endpoints.[/dim]")
        return

    print_entries(entries, title="Documented endpoints")
