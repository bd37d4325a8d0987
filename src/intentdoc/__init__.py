"""
intentdoc - intent-driven API documentation.

Attach intent, business rules and examples to route declarations, collect
them in one registry, and render them as JSON, Markdown or a browsable
HTML page.

    from intentdoc import intent

    intent(route, "Create User").description("Registers a new account").rules([
        "Email must be unique",
    ])
"""

__version__ = "1.0.0"

from intentdoc.builder import RouteIntentBuilder, install, intent, uninstall  # noqa: E402
from intentdoc.entry import IntentEntry  # noqa: E402
from intentdoc.formatters import (  # noqa: E402
    HtmlFormatter,
    JsonFormatter,
    MarkdownFormatter,
    OutputFormat,
    get_formatter,
)
from intentdoc.generator import GenerationResult, GenerationStatus, IntentDocGenerator  # noqa: E402
from intentdoc.loader import LoadReport, RouteLoader  # noqa: E402
from intentdoc.registry import IntentRegistry, clear_registry, get_registry  # noqa: E402

__all__ = [
    "__version__",
    "GenerationResult",
    "GenerationStatus",
    "HtmlFormatter",
    "IntentDocGenerator",
    "IntentEntry",
    "IntentRegistry",
    "JsonFormatter",
    "LoadReport",
    "MarkdownFormatter",
    "OutputFormat",
    "RouteIntentBuilder",
    "RouteLoader",
    "clear_registry",
    "get_formatter",
    "get_registry",
    "install",
    "intent",
    "uninstall",
]
