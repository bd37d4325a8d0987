"""
FastAPI application factory and mounting helpers.

``create_app()`` builds a standalone docs server; ``mount_intent_doc()``
adds the docs router to an existing host application.

Manifesto:
    The docs surface is thin glue over the generator's building blocks:
    a registry snapshot and a formatter. Host applications mount it next
    to their own routes; ``intentdoc serve`` runs it on its own.

Tags:
    intentdoc, api, app-factory, FastAPI

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from intentdoc.api.deps import LOADER_STATE_KEY, REGISTRY_STATE_KEY
from intentdoc.api.routers import intent_doc
from intentdoc.core.errors import InvalidConfigError
from intentdoc.core.logging import get_logger
from intentdoc.core.settings import IntentDocSettings, get_settings
from intentdoc.loader import RouteLoader
from intentdoc.registry import IntentRegistry


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan — load route sources once at startup."""
    log = get_logger("intentdoc.api")
    loader = getattr(app.state, LOADER_STATE_KEY, None)
    if loader is not None:
        report = loader.load()
        log.info("intentdoc_api_starting", loaded=len(report.loaded), failed=report.failed_sources)
    yield
    log.info("intentdoc_api_shutting_down")


def mount_intent_doc(
    app: FastAPI,
    *,
    prefix: str = "/intent-doc",
    registry: IntentRegistry | None = None,
    loader: RouteLoader | None = None,
) -> FastAPI:
    """Include the docs router in *app* under *prefix*.

    ``registry`` and ``loader`` are stored on ``app.state``; when omitted
    the router uses the process-wide registry and a settings-driven loader.

    Raises:
        InvalidConfigError: If *prefix* is empty or does not start with ``/``.
    """
    mount_point = prefix.rstrip("/")
    if not mount_point.startswith("/"):
        raise InvalidConfigError(
            "The docs router needs a non-root prefix starting with '/'", prefix=prefix
        )
    if registry is not None:
        setattr(app.state, REGISTRY_STATE_KEY, registry)
    if loader is not None:
        setattr(app.state, LOADER_STATE_KEY, loader)
    app.include_router(intent_doc.router, prefix=mount_point, tags=["intent-doc"])
    return app


def create_app(
    settings: IntentDocSettings | None = None,
    *,
    registry: IntentRegistry | None = None,
    loader: RouteLoader | None = None,
) -> FastAPI:
    """Build a standalone docs application.

    Parameters
    ----------
    settings : IntentDocSettings | None
        Override settings (useful for testing). When ``None`` the cached
        singleton from :func:`get_settings` is used.
    registry : IntentRegistry | None
        Registry to serve; the process-wide one when ``None``.
    loader : RouteLoader | None
        Loader run at startup and per request; built from
        ``settings.route_modules`` when ``None``.
    """
    settings = settings or get_settings()

    app = FastAPI(title=settings.title, lifespan=lifespan)
    app.state.settings = settings
    app.dependency_overrides[get_settings] = lambda: settings

    return mount_intent_doc(
        app,
        prefix=settings.api_prefix,
        registry=registry,
        loader=loader or RouteLoader(settings.route_modules),
    )
