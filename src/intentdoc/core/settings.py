"""Settings for intentdoc.

All values can be overridden with ``INTENTDOC_``-prefixed environment
variables or a ``.env`` file in the working directory. List values such as
``route_modules`` are given as JSON (``INTENTDOC_ROUTE_MODULES='["app.routes"]'``).

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    The CLI, the web router and the generator read the same settings
    object so a project configures its route modules exactly once.

Tags:
    settings, configuration, pydantic, environment, intentdoc

Doc-Types:
    - Configuration Guide
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IntentDocSettings(BaseSettings):
    """Settings shared by the generator, the CLI and the web router.

    Order of precedence (highest → lowest):
        1. Environment variables (``INTENTDOC_OUTPUT_DIR``, etc.)
        2. ``.env`` file
        3. Defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="INTENTDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Route sources ────────────────────────────────────────────────────
    route_modules: list[str] = Field(
        default_factory=list,
        description="Dotted modules (or packages) that declare documented routes",
    )

    # ── Output ───────────────────────────────────────────────────────────
    project_root: Path | None = Field(
        default=None,
        description="Project root; detected from pyproject.toml/.git when unset",
    )
    output_dir: str = Field(default="intent-doc", description="Default-mode output directory")
    title: str = Field(default="API Documentation", description="Heading used by Markdown and HTML output")

    # ── Web ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/intent-doc", description="Mount point of the docs router")
    host: str = Field(default="127.0.0.1", description="Bind address for `intentdoc serve`")
    port: int = Field(default=8000, description="Bind port for `intentdoc serve`")

    # ── Observability ────────────────────────────────────────────────────
    log_level: str = Field(default="WARNING", description="Structlog log level")
    json_logs: bool | None = Field(default=None, description="Force JSON (True) or console (False) logs")

    def resolved_project_root(self) -> Path:
        """Return the configured project root or the detected one."""
        if self.project_root is not None:
            return Path(self.project_root).expanduser().resolve()
        return find_project_root()

    def default_output_path(self) -> Path:
        """Directory written by the default (two-artifact) mode."""
        return self.resolved_project_root() / self.output_dir


def find_project_root(start: Path | None = None) -> Path:
    """Walk upward from *start* to find the project root.

    Recognised root markers (checked in order): ``pyproject.toml``,
    ``.git`` directory, ``setup.py``. Falls back to *start* (or cwd) when
    no marker is found.
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").exists():
            return directory
        if (directory / ".git").exists():
            return directory
        if (directory / "setup.py").exists():
            return directory
    return current


@lru_cache(maxsize=1)
def get_settings() -> IntentDocSettings:
    """Cached settings — loaded once per process."""
    return IntentDocSettings()
