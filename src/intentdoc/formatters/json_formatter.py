"""Data-interchange formatter — the canonical JSON document.

Document shape::

    {
        "version": "1.0",
        "generated_at": "<ISO-8601>",
        "endpoints": [
            {"name", "description", "method", "endpoint", "rules", "request", "response"}
        ]
    }

This is also the document embedded by the HTML page and served by the
``/api`` endpoint.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from intentdoc.entry import IntentEntry, normalize_entry
from intentdoc.formatters.base import DOCUMENT_VERSION, Formatter, pretty_json


class JsonFormatter(Formatter):
    """Render the catalog as the versioned JSON document."""

    format_name = "json"
    media_type = "application/json"
    extension = "json"

    def build_document(
        self,
        entries: Iterable[IntentEntry | Mapping[str, Any]],
        generated_at: datetime | None = None,
    ) -> dict[str, Any]:
        """The document as a plain dict (before encoding)."""
        return {
            "version": DOCUMENT_VERSION,
            "generated_at": self._timestamp(generated_at).isoformat(),
            "endpoints": self._normalize(entries),
        }

    def render(
        self,
        entries: Iterable[IntentEntry | Mapping[str, Any]],
        generated_at: datetime | None = None,
    ) -> str:
        return pretty_json(self.build_document(entries, generated_at))

    @staticmethod
    def decode(text: str) -> dict[str, Any]:
        """Parse a rendered document, normalising every endpoint."""
        document = json.loads(text)
        document["endpoints"] = [normalize_entry(e) for e in document.get("endpoints", [])]
        return document

    @classmethod
    def decode_entries(cls, text: str) -> list[IntentEntry]:
        """Parse a rendered document back into entries."""
        return [IntentEntry.from_dict(e) for e in cls.decode(text)["endpoints"]]
