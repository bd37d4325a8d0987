"""
CLI utility helpers — consoles, settings overrides and entry tables.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from intentdoc.core.settings import IntentDocSettings, get_settings

console = Console()
err_console = Console(stderr=True)


def make_settings(
    modules: list[str] | None = None,
    project_root: Path | None = None,
) -> IntentDocSettings:
    """Cached settings with CLI overrides applied.

    ``--module`` values are appended to ``route_modules``.
    """
    settings = get_settings()
    updates: dict[str, Any] = {}
    if modules:
        updates["route_modules"] = [*settings.route_modules, *modules]
    if project_root is not None:
        updates["project_root"] = project_root
    if updates:
        settings = settings.model_copy(update=updates)
    return settings


@contextmanager
def importable_project(settings: IntentDocSettings) -> Iterator[None]:
    """Put the project root on ``sys.path`` while a command runs.

    Dotted route modules resolve from the project root; the entry is
    removed again on exit when this call added it.
    """
    root = str(settings.resolved_project_root())
    added = root not in sys.path
    if added:
        sys.path.insert(0, root)
    try:
        yield
    finally:
        if added and root in sys.path:
            sys.path.remove(root)


def print_entries(entries: list[dict[str, Any]], *, title: str = "") -> None:
    """Render registry entries as a Rich table."""
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Method", style="cyan")
    table.add_column("Endpoint", overflow="fold")
    table.add_column("Name")
    table.add_column("Rules", justify="right")
    for index, entry in enumerate(entries, start=1):
        table.add_row(
            str(index),
            entry["method"] or "-",
            entry["endpoint"] or "-",
            entry["name"],
            str(len(entry["rules"])),
        )
    console.print(table)
