"""
Formatters for intent documentation.

Three interchangeable formatters share the ``render(entries, generated_at)``
contract and are selected by an explicit discriminator:

=============  ====================  ========================
OutputFormat   aliases               formatter
=============  ====================  ========================
``json``       ``data-interchange``  :class:`JsonFormatter`
``markdown``   ``formatted-text``    :class:`MarkdownFormatter`
``html``       ``browsable-page``    :class:`HtmlFormatter`
=============  ====================  ========================
"""

from __future__ import annotations

from enum import Enum

from intentdoc.core.errors import UnknownFormatError
from intentdoc.formatters.base import DOCUMENT_VERSION, Formatter
from intentdoc.formatters.html_formatter import HtmlFormatter
from intentdoc.formatters.json_formatter import JsonFormatter
from intentdoc.formatters.markdown_formatter import MarkdownFormatter


class OutputFormat(str, Enum):
    """Discriminator selecting a formatter."""

    JSON = "json"
    MARKDOWN = "markdown"
    HTML = "html"


_ALIASES: dict[str, OutputFormat] = {
    "json": OutputFormat.JSON,
    "data-interchange": OutputFormat.JSON,
    "markdown": OutputFormat.MARKDOWN,
    "md": OutputFormat.MARKDOWN,
    "formatted-text": OutputFormat.MARKDOWN,
    "html": OutputFormat.HTML,
    "page": OutputFormat.HTML,
    "browsable-page": OutputFormat.HTML,
}

FORMATTERS: dict[OutputFormat, type[Formatter]] = {
    OutputFormat.JSON: JsonFormatter,
    OutputFormat.MARKDOWN: MarkdownFormatter,
    OutputFormat.HTML: HtmlFormatter,
}


def resolve_format(value: str | OutputFormat | None) -> OutputFormat:
    """Map a discriminator or alias to an :class:`OutputFormat`.

    ``None`` and the empty string select JSON.

    Raises:
        UnknownFormatError: If *value* names no formatter.
    """
    if isinstance(value, OutputFormat):
        return value
    if not value:
        return OutputFormat.JSON
    try:
        return _ALIASES[value.strip().lower()]
    except KeyError:
        raise UnknownFormatError(value, sorted(_ALIASES)) from None


def get_formatter(value: str | OutputFormat | None = None, *, title: str | None = None) -> Formatter:
    """Instantiate the formatter selected by *value*."""
    kind = resolve_format(value)
    formatter_cls = FORMATTERS[kind]
    if title is not None and formatter_cls is not JsonFormatter:
        return formatter_cls(title=title)
    return formatter_cls()


__all__ = [
    "DOCUMENT_VERSION",
    "FORMATTERS",
    "Formatter",
    "HtmlFormatter",
    "JsonFormatter",
    "MarkdownFormatter",
    "OutputFormat",
    "get_formatter",
    "resolve_format",
]
