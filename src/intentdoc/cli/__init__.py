"""
intentdoc command-line interface.

Entry point: ``intentdoc`` (see ``[project.scripts]``).
"""

from intentdoc.cli.app import app


def main() -> None:
    app()


__all__ = ["app", "main"]
