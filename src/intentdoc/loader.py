"""Forced route evaluation.

Intent builders register their entries when the route declarations run,
which in Python means when the modules declaring them are imported.
:class:`RouteLoader` makes sure every configured source has run before
documentation is generated.

Ordering:
    1. The host finalize hook (``finalize``), when given. Typically an
       application factory or ``app.openapi``: anything that makes the
       host evaluate its routes.
    2. Every configured module, in order. Packages are walked
       recursively. Imports are cached by Python, so a source runs at most
       once per process and repeated loads never duplicate entries.

A failing hook or module is logged and recorded in the :class:`LoadReport`;
it never stops the remaining sources from loading.
"""

from __future__ import annotations

import importlib
import pkgutil
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from intentdoc.core.errors import SourceLoadError
from intentdoc.core.logging import get_logger

logger = get_logger(__name__)

FINALIZE_SOURCE = "<finalize>"


@dataclass
class LoadReport:
    """Outcome of one :meth:`RouteLoader.load` pass."""

    loaded: list[str] = field(default_factory=list)
    failed: list[SourceLoadError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def failed_sources(self) -> list[str]:
        return [err.context.get("source", "?") for err in self.failed]


class RouteLoader:
    """Evaluate route-declaration sources so every builder has registered.

    Args:
        modules: Dotted module or package names declaring documented routes.
        finalize: Optional zero-arg host hook run before the modules.
    """

    def __init__(
        self,
        modules: Iterable[str] = (),
        *,
        finalize: Callable[[], Any] | None = None,
    ) -> None:
        self.modules = [m for m in modules if m]
        self.finalize = finalize

    def load(self) -> LoadReport:
        report = LoadReport()

        if self.finalize is not None:
            self._run(FINALIZE_SOURCE, self.finalize, report)

        for name in self.modules:
            module = self._run(name, lambda n=name: importlib.import_module(n), report)
            if module is not None and hasattr(module, "__path__"):
                self._load_package(module, report)

        logger.debug(
            "route_sources_loaded",
            loaded=len(report.loaded),
            failed=len(report.failed),
        )
        return report

    def _load_package(self, package: Any, report: LoadReport) -> None:
        failures: list[str] = []

        def onerror(name: str) -> None:
            failures.append(name)

        for info in pkgutil.walk_packages(package.__path__, prefix=f"{package.__name__}.", onerror=onerror):
            self._run(info.name, lambda n=info.name: importlib.import_module(n), report)

        # walk_packages reports subpackages it could not import through onerror
        for name in failures:
            if name not in report.failed_sources:
                self._record_failure(name, None, report)

    @staticmethod
    def _run(source: str, action: Callable[[], Any], report: LoadReport) -> Any:
        try:
            result = action()
        except Exception as exc:
            RouteLoader._record_failure(source, exc, report)
            return None
        report.loaded.append(source)
        return result

    @staticmethod
    def _record_failure(source: str, exc: BaseException | None, report: LoadReport) -> None:
        error = SourceLoadError(
            f"Route source '{source}' failed to load",
            cause=exc,
            source=source,
        )
        report.failed.append(error)
        logger.warning(
            "route_source_failed",
            source=source,
            error=str(exc) if exc is not None else "import failed",
        )

    def __repr__(self) -> str:
        return f"RouteLoader(modules={self.modules!r}, finalize={self.finalize is not None})"
