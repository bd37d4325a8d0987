"""
Base formatter for intent documentation.

Provides the shared contract and helpers for every output kind: entry
normalisation, the generation timestamp, JSON pretty-printing and Jinja2
template loading.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from intentdoc.entry import IntentEntry, normalize_entry

#: Version string written into every JSON document.
DOCUMENT_VERSION = "1.0"


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    """Jinja2 environment over the packaged ``intentdoc/templates``."""
    return Environment(
        loader=PackageLoader("intentdoc", "templates"),
        autoescape=select_autoescape(["html", "html.j2"], default_for_string=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def utc_now() -> datetime:
    """Current time, UTC, whole seconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def pretty_json(value: Any) -> str:
    """Pretty-print a JSON-like value; unknown objects are stringified."""
    return json.dumps(value, indent=4, ensure_ascii=False, default=str)


class Formatter(ABC):
    """Base class for intent documentation formatters.

    Manifesto:
        Formatters are pure functions of (entries, timestamp). They never
        touch the registry and never mutate their input, so the same
        catalog can be rendered to every format from one snapshot.

    Architecture:
        ```
        registry.all() / list[IntentEntry]
                  │
                  ▼
          normalize_entry()  (seven fields, defaults filled)
                  │
                  ▼
          Formatter.render(entries, generated_at)
                  │
                  ▼
             artifact (str)
        ```

    Tags:
        - formatter
        - renderer
        - jinja2

    Doc-Types:
        - API_REFERENCE (section: "Formatters")
    """

    #: Discriminator value selecting this formatter.
    format_name: str = ""

    #: Content type used when the artifact is served over HTTP.
    media_type: str = "text/plain"

    #: File extension (without dot) used for generated files.
    extension: str = "txt"

    @abstractmethod
    def render(
        self,
        entries: Iterable[IntentEntry | Mapping[str, Any]],
        generated_at: datetime | None = None,
    ) -> str:
        """Render *entries* into one artifact.

        Args:
            entries: Entries or serialized entry mappings, in display order
            generated_at: Generation timestamp; current UTC time when omitted

        Returns:
            The rendered artifact
        """

    @staticmethod
    def _normalize(entries: Iterable[IntentEntry | Mapping[str, Any]]) -> list[dict[str, Any]]:
        return [normalize_entry(entry) for entry in entries]

    @staticmethod
    def _timestamp(generated_at: datetime | None) -> datetime:
        return generated_at if generated_at is not None else utc_now()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name!r})"
