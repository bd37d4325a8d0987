"""Formatted-text formatter — one Markdown section per documented route."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from intentdoc.entry import IntentEntry
from intentdoc.formatters.base import Formatter, pretty_json, template_environment


class MarkdownFormatter(Formatter):
    """Render the catalog as Markdown.

    Each entry becomes a ``##`` heading followed by its description,
    ``METHOD path`` code span, rules list and fenced JSON examples; entries
    are separated by horizontal rules, in registry order.
    """

    format_name = "markdown"
    media_type = "text/markdown"
    extension = "md"
    template_name = "api-doc.md.j2"

    def __init__(self, title: str = "API Documentation"):
        self.title = title

    def render(
        self,
        entries: Iterable[IntentEntry | Mapping[str, Any]],
        generated_at: datetime | None = None,
    ) -> str:
        template = template_environment().get_template(self.template_name)
        return template.render(
            title=self.title,
            generated_at=self._timestamp(generated_at).strftime("%Y-%m-%d %H:%M:%S"),
            entries=[self._view(entry) for entry in self._normalize(entries)],
        )

    @staticmethod
    def _view(entry: dict[str, Any]) -> dict[str, Any]:
        signature = " ".join(str(part) for part in (entry["method"], entry["endpoint"]) if part)
        return {
            "name": entry["name"],
            "description": entry["description"],
            "signature": signature or "-",
            "rules": [str(rule) for rule in entry["rules"]],
            "request_json": pretty_json(entry["request"]) if entry["request"] else "",
            "response_json": pretty_json(entry["response"]) if entry["response"] else "",
        }
