"""
Intent documentation router — the catalog over HTTP.

Endpoints:
    GET {prefix}       Browsable page with the catalog embedded inline
    GET {prefix}/api   The JSON document (``application/json``)

Both endpoints force route evaluation first, then render the current
registry snapshot. An empty catalog is a valid document, never an error.

Doc-Types: API_REFERENCE
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from intentdoc.api.deps import Loader, Registry, Settings
from intentdoc.core.logging import get_logger
from intentdoc.formatters import HtmlFormatter, JsonFormatter

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_class=HTMLResponse, name="intent-doc.index")
def read_page(registry: Registry, loader: Loader, settings: Settings) -> HTMLResponse:
    """Browsable documentation page.

    Example:
        GET /intent-doc
    """
    report = loader.load()
    entries = registry.all()
    logger.debug("intent_doc_page_served", entries=len(entries), failed_sources=report.failed_sources)
    return HTMLResponse(HtmlFormatter(title=settings.title).render(entries))


@router.get("/api", name="intent-doc.api")
def read_document(registry: Registry, loader: Loader) -> Response:
    """The intent catalog as the versioned JSON document.

    Example:
        GET /intent-doc/api

        Response:
        {
            "version": "1.0",
            "generated_at": "2026-01-15T12:00:00+00:00",
            "endpoints": [
                {
                    "name": "List Users",
                    "description": "",
                    "method": "GET",
                    "endpoint": "/users",
                    "rules": [],
                    "request": {},
                    "response": {}
                }
            ]
        }
    """
    loader.load()
    formatter = JsonFormatter()
    return Response(content=formatter.render(registry.all()), media_type=formatter.media_type)
