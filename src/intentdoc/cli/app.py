"""
Root Typer application for the intentdoc CLI.

``serve`` is a sub-application; uvicorn is only imported when it runs.
"""

from __future__ import annotations

import typer
from typer import Typer

from intentdoc.cli.generate import generate, list_entries
from intentdoc.cli.serve import app as serve_app
from intentdoc.core.logging import configure_logging
from intentdoc.core.settings import get_settings

app = Typer(
    name="intentdoc",
    help="intentdoc — intent-driven API documentation.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version("intentdoc")
        except PackageNotFoundError:
            from intentdoc import __version__ as v
        typer.echo(f"intentdoc {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """intentdoc CLI — generate, list and serve intent documentation."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


# ── Commands ─────────────────────────────────────────────────────────────

app.command("generate")(generate)
app.command("list")(list_entries)
app.add_typer(serve_app, name="serve", help="Serve the documentation over HTTP.")
