"""
Documentation generator.

Coordinates documentation generation: forcing route evaluation, reading
the registry snapshot, rendering and writing artifacts.

Example:
    >>> generator = IntentDocGenerator(loader=RouteLoader(["app.routes"]))
    >>> result = generator.generate()
    >>> result.artifacts
    [PosixPath('/project/intent-doc/api-doc.json'), PosixPath('/project/intent-doc/index.html')]
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from intentdoc.core.errors import ArtifactWriteError
from intentdoc.core.logging import LogContext, get_logger
from intentdoc.core.settings import IntentDocSettings, get_settings
from intentdoc.formatters import HtmlFormatter, JsonFormatter, OutputFormat, get_formatter, resolve_format
from intentdoc.formatters.base import utc_now
from intentdoc.loader import LoadReport, RouteLoader
from intentdoc.registry import IntentRegistry, get_registry

logger = get_logger(__name__)

JSON_ARTIFACT = "api-doc.json"
HTML_ARTIFACT = "index.html"


class GenerationStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"


@dataclass
class GenerationResult:
    """Outcome of :meth:`IntentDocGenerator.generate`."""

    status: GenerationStatus
    entry_count: int = 0
    artifacts: list[Path] = field(default_factory=list)
    load_report: LoadReport = field(default_factory=LoadReport)

    @property
    def success(self) -> bool:
        return self.status is GenerationStatus.OK


class IntentDocGenerator:
    """Orchestrate intent documentation generation.

    Manifesto:
        One call produces complete documentation. The generator makes
        sure every route source has run, refuses to write anything for an
        empty catalog, and writes either the default two-artifact
        directory or one explicitly requested file.

    Architecture:
        ```
        IntentDocGenerator.generate(output, format)
              │
              ├──► RouteLoader.load()          (finalize hook, then modules)
              │
              ├──► IntentRegistry.all()        (snapshot)
              │         │
              │         └── empty? ──► GenerationResult(EMPTY), nothing written
              │
              ├──► output is None:
              │        JsonFormatter ──► <root>/intent-doc/api-doc.json
              │        HtmlFormatter ──► <root>/intent-doc/index.html (same JSON inline)
              │
              └──► output given:
                       get_formatter(format) ──► output
        ```

    Guardrails:
        - Do NOT render JSON and HTML with different timestamps
          ✅ The page embeds the exact JSON bytes written next to it
        - Do NOT retry failed writes
          ✅ Raise ArtifactWriteError and let the caller re-run

    Tags:
        - orchestrator
        - generation

    Doc-Types:
        - API_REFERENCE (section: "Generation")
    """

    def __init__(
        self,
        *,
        registry: IntentRegistry | None = None,
        loader: RouteLoader | None = None,
        settings: IntentDocSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry if registry is not None else get_registry()
        self.loader = loader if loader is not None else RouteLoader(self.settings.route_modules)
        self.clock = clock or utc_now
        self.last_load_report = LoadReport()

    def collect(self) -> list[dict[str, Any]]:
        """Force route evaluation and return the registry snapshot."""
        self.last_load_report = self.loader.load()
        return self.registry.all()

    def generate(
        self,
        output: str | Path | None = None,
        format: str | OutputFormat | None = None,
    ) -> GenerationResult:
        """Generate documentation artifacts.

        Args:
            output: Destination file; default two-artifact mode when ``None``
            format: Formatter discriminator for explicit mode (default json)

        Returns:
            GenerationResult; ``status`` is EMPTY when nothing was documented

        Raises:
            UnknownFormatError: If *format* names no formatter
            ArtifactWriteError: If the directory or a file cannot be written
        """
        # Resolve before loading so a bad format fails fast.
        kind = resolve_format(format) if output else OutputFormat.JSON

        entries = self.collect()
        report = self.last_load_report

        if not entries:
            logger.warning("no_intent_documentation_found", failed_sources=report.failed_sources)
            return GenerationResult(GenerationStatus.EMPTY, load_report=report)

        generated_at = self.clock()
        with LogContext(entry_count=len(entries)):
            if output:
                artifacts = [self._write_single(Path(output), kind, entries, generated_at)]
            else:
                artifacts = self._write_default(entries, generated_at)

        return GenerationResult(
            GenerationStatus.OK,
            entry_count=len(entries),
            artifacts=artifacts,
            load_report=report,
        )

    def _write_default(self, entries: list[dict[str, Any]], generated_at: datetime) -> list[Path]:
        directory = self.settings.default_output_path()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ArtifactWriteError(
                f"Cannot create output directory {directory}", cause=exc, path=directory
            ) from exc

        document = JsonFormatter().render(entries, generated_at)
        page = HtmlFormatter(title=self.settings.title).render_document(document)
        return [
            self._write(directory / JSON_ARTIFACT, document),
            self._write(directory / HTML_ARTIFACT, page),
        ]

    def _write_single(
        self,
        path: Path,
        kind: OutputFormat,
        entries: list[dict[str, Any]],
        generated_at: datetime,
    ) -> Path:
        formatter = get_formatter(kind, title=self.settings.title)
        content = formatter.render(entries, generated_at)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ArtifactWriteError(
                f"Cannot create output directory {path.parent}", cause=exc, path=path.parent
            ) from exc
        return self._write(path, content)

    @staticmethod
    def _write(path: Path, content: str) -> Path:
        try:
            with path.open("w", encoding="utf-8") as fh:
                fh.write(content)
        except OSError as exc:
            raise ArtifactWriteError(f"Cannot write {path}", cause=exc, path=path) from exc
        logger.info("artifact_written", path=str(path), bytes=len(content.encode("utf-8")))
        return path
