"""
CLI: ``intentdoc serve`` — serve the docs page and JSON document.
"""

from __future__ import annotations

from pathlib import Path

import typer

from intentdoc.cli.utils import console, importable_project, make_settings

app = typer.Typer(no_args_is_help=True)


@app.command("start")
def start(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address (default: settings)"),  # noqa: UP007
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (default: settings)"),  # noqa: UP007
    module: list[str] | None = typer.Option(  # noqa: UP007
        None, "--module", "-m", help="Route module or package to load (repeatable)"
    ),
    project_root: Path | None = typer.Option(None, "--project-root"),  # noqa: UP007
    log_level: str = typer.Option("info", "--log-level"),
) -> None:
    """Start the intentdoc web server."""
    try:
        import uvicorn
    except ImportError as e:
        console.print("[red]uvicorn is required.  Install with:  pip install intentdoc[api][/red]")
        raise typer.Exit(code=1) from e

    from intentdoc.api.app import create_app

    settings = make_settings(module, project_root)
    bind_host = host or settings.host
    bind_port = port or settings.port

    console.print(f"[bold green]Starting intentdoc[/bold green] on http://{bind_host}:{bind_port}{settings.api_prefix}")
    with importable_project(settings):
        uvicorn.run(
            create_app(settings),
            host=bind_host,
            port=bind_port,
            log_level=log_level,
        )
