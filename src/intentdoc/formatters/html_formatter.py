"""Browsable-page formatter — a self-contained HTML viewer.

The page embeds the JSON document inline (no fetch, so it works from
``file://``) and renders it client-side: a sidebar entry per endpoint,
collapsible cards, and live filtering over name, path, method and
description.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from intentdoc.entry import IntentEntry
from intentdoc.formatters.base import Formatter, template_environment
from intentdoc.formatters.json_formatter import JsonFormatter


def embeddable_json(document: str) -> str:
    """Make a JSON document safe inside a ``<script>`` element.

    ``<``, ``>`` and ``&`` only occur inside JSON strings, where their
    ``\\uXXXX`` escapes decode to the same value. With none of them left
    raw, no catalog text can end or re-open the script element.
    """
    return document.replace("&", "\\u0026").replace("<", "\\u003c").replace(">", "\\u003e")


class HtmlFormatter(Formatter):
    """Render the catalog as a browsable single-file page."""

    format_name = "html"
    media_type = "text/html"
    extension = "html"
    template_name = "index.html.j2"

    def __init__(self, title: str = "API Documentation"):
        self.title = title

    def render(
        self,
        entries: Iterable[IntentEntry | Mapping[str, Any]],
        generated_at: datetime | None = None,
    ) -> str:
        return self.render_document(JsonFormatter().render(entries, generated_at))

    def render_document(self, document: str) -> str:
        """Render the page around an already-rendered JSON *document*."""
        template = template_environment().get_template(self.template_name)
        return template.render(
            title=self.title,
            documentation_json=embeddable_json(document),
        )
