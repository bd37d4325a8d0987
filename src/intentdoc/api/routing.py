"""FastAPI route integration.

After :func:`install_route_extension`, every FastAPI ``APIRoute`` gains an
``intent(name)`` method::

    router = APIRouter()

    @router.post("/users/{user_id}")
    def update_user(user_id: int): ...

    latest_route(router).intent("Update User").rules(["Owner only"])

Attributes of the route that the builder does not define (``name``,
``dependencies``, ``url_path_for`` ...) stay reachable through it.
"""

from __future__ import annotations

from typing import Any

from fastapi.routing import APIRoute

from intentdoc.builder import install, uninstall
from intentdoc.registry import IntentRegistry


def install_route_extension(
    route_class: type = APIRoute,
    *,
    registry: IntentRegistry | None = None,
) -> type:
    """Install ``route_class.intent(name)``."""
    return install(route_class, registry=registry)


def uninstall_route_extension(route_class: type = APIRoute) -> None:
    uninstall(route_class)


def latest_route(router: Any) -> Any:
    """The most recently declared route of a FastAPI app or router."""
    if not router.routes:
        raise LookupError("Router has no routes declared yet")
    return router.routes[-1]
