"""
FastAPI dependency injection for the docs router.

Usage in routers::

    from intentdoc.api.deps import Loader, Registry, Settings

    @router.get("/api")
    def read_document(registry: Registry, loader: Loader):
        ...

Manifesto:
    The router never reaches for module globals. The registry and loader
    come from ``app.state`` when :func:`~intentdoc.api.app.mount_intent_doc`
    placed them there, and fall back to the process-wide registry and a
    settings-driven loader otherwise.

Tags:
    intentdoc, api, dependency-injection
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from intentdoc.core.settings import IntentDocSettings, get_settings
from intentdoc.loader import RouteLoader
from intentdoc.registry import IntentRegistry
from intentdoc.registry import get_registry as get_default_registry

REGISTRY_STATE_KEY = "intentdoc_registry"
LOADER_STATE_KEY = "intentdoc_loader"


def get_registry(request: Request) -> IntentRegistry:
    """Registry stored on the app, or the process-wide one."""
    registry = getattr(request.app.state, REGISTRY_STATE_KEY, None)
    if registry is None:
        return get_default_registry()
    return registry


def get_loader(
    request: Request,
    settings: Annotated[IntentDocSettings, Depends(get_settings)],
) -> RouteLoader:
    """Loader stored on the app, or one built from settings."""
    loader = getattr(request.app.state, LOADER_STATE_KEY, None)
    if loader is None:
        return RouteLoader(settings.route_modules)
    return loader


Settings = Annotated[IntentDocSettings, Depends(get_settings)]
Registry = Annotated[IntentRegistry, Depends(get_registry)]
Loader = Annotated[RouteLoader, Depends(get_loader)]
