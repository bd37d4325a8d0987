"""
Route intent builder — fluent documentation attached to a route object.

``intent(route, name)`` (or ``route.intent(name)`` once :func:`install`
has extended the route class) returns a :class:`RouteIntentBuilder` that
accumulates description, rules and examples while letting the host's own
fluent configuration calls continue on the same expression.

Manifesto:
    Documentation lives next to the route it documents and must not
    disturb the routing API. The builder therefore forwards every
    attribute it does not define to the underlying route, untouched, and
    records its entry without any terminal call.

Architecture:
    ::

        route.intent("Create User")          ── register(entry)   (exactly once)
             .description("...")             ── revise(slot)
             .rules([...])                   ── revise(slot)
             .middleware("auth")             ── forwarded → route.middleware("auth")
             .name("users.store")            ── forwarded → route.name(...)

    The entry is registered when the builder is constructed, carrying
    ``name``, ``method``, ``endpoint`` and empty defaults. Every mutator
    replaces that same slot with a new frozen value, so the registry holds
    one entry per builder whatever follows in the chain, and nothing
    depends on when the builder is garbage-collected.

Seams:
    - Builder methods (``description``, ``rules``, ``request``,
      ``response``, ``unwrap``) shadow same-named route attributes; use
      ``unwrap()`` to reach those on the route.
    - Forwarded calls return the route's own result; whatever the route
      returns (often the route itself) continues the chain.
    - Attribute assignment is not forwarded.

Examples:
    >>> builder = intent(route, "List Users").description("Paginated list")
    >>> builder.unwrap() is route
    True

Tags:
    intentdoc, builder, fluent-api, proxy, delegation

Doc-Types:
    - API Reference
    - Usage Guide
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any

from intentdoc.core.logging import get_logger
from intentdoc.entry import IntentEntry, normalize_path
from intentdoc.registry import IntentRegistry, get_registry

logger = get_logger(__name__)

_PATH_ATTRIBUTES = ("path", "uri", "path_format", "rule")
_OWN_ATTRIBUTES = frozenset({"_route", "_entry", "_registry"})


def _read_route_attribute(route: Any, name: str) -> Any:
    """Read *name* from the route, calling it when it is a zero-arg accessor.

    Anything the route raises while being read counts as "not declared".
    """
    try:
        value = getattr(route, name, None)
        if callable(value):
            value = value()
    except Exception:
        return None
    return value


def _method_order(method: str) -> tuple[int, str]:
    if method == "GET":
        return (0, method)
    if method in ("HEAD", "OPTIONS"):
        return (2, method)
    return (1, method)


def route_method(route: Any) -> str | None:
    """First HTTP method declared by *route*, upper-cased, or ``None``.

    Sequences keep their declared order. Unordered collections (Starlette
    and FastAPI use sets) are ordered ``GET`` first, ``HEAD``/``OPTIONS``
    last, the rest alphabetically.
    """
    methods = _read_route_attribute(route, "methods")
    if methods is None:
        methods = _read_route_attribute(route, "method")
    if not methods:
        return None
    if isinstance(methods, str):
        return methods.upper()
    if isinstance(methods, (set, frozenset)):
        methods = sorted((str(m).upper() for m in methods), key=_method_order)
    for method in methods:
        return str(method).upper()
    return None


def route_path(route: Any) -> str | None:
    """Normalised path of *route* (leading slash), or ``None``."""
    for name in _PATH_ATTRIBUTES:
        value = _read_route_attribute(route, name)
        if isinstance(value, str):
            return normalize_path(value)
    return None


class RouteIntentBuilder:
    """Fluent builder for one route's intent documentation.

    Args:
        route: Host route-declaration object. Only read, never mutated.
        name: Human label of the documented operation.
        registry: Target registry; the process-wide one when ``None``.

    Raises:
        InvalidIntentError: If *name* is empty.
    """

    def __init__(
        self,
        route: Any,
        name: str,
        *,
        registry: IntentRegistry | None = None,
    ) -> None:
        self._route = route
        self._registry = registry if registry is not None else get_registry()
        self._entry = self._registry.register(
            IntentEntry(
                name=name,
                method=route_method(route),
                endpoint=route_path(route),
            )
        )

    # ── Documentation surface ────────────────────────────────────────────

    def description(self, description: str) -> RouteIntentBuilder:
        """Set the free-text description."""
        if not isinstance(description, str):
            raise TypeError(f"description must be a str, got {type(description).__name__}")
        return self._revise(description=description)

    def rules(self, rules: Sequence[Any]) -> RouteIntentBuilder:
        """Set the business rules, in display order."""
        if isinstance(rules, (str, bytes)) or not isinstance(rules, Sequence):
            raise TypeError(f"rules must be a sequence of strings, got {type(rules).__name__}")
        return self._revise(rules=tuple(copy.deepcopy(list(rules))))

    def request(self, payload: Mapping[str, Any] | list[Any]) -> RouteIntentBuilder:
        """Set the illustrative request payload."""
        return self._revise(request=self._payload("request", payload))

    def response(self, payload: Mapping[str, Any] | list[Any]) -> RouteIntentBuilder:
        """Set the illustrative response payload."""
        return self._revise(response=self._payload("response", payload))

    def unwrap(self) -> Any:
        """Return the underlying route object."""
        return self._route

    # ── Delegation ───────────────────────────────────────────────────────

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes the builder itself does not define.
        if name in _OWN_ATTRIBUTES or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return getattr(self._route, name)

    def __repr__(self) -> str:
        entry = self._entry
        return f"RouteIntentBuilder({entry.name!r}, method={entry.method!r}, endpoint={entry.endpoint!r})"

    # ── Internals ────────────────────────────────────────────────────────

    @staticmethod
    def _payload(field_name: str, payload: Any) -> Any:
        if not isinstance(payload, (Mapping, list)):
            raise TypeError(f"{field_name} must be a mapping or list, got {type(payload).__name__}")
        if isinstance(payload, Mapping):
            return copy.deepcopy(dict(payload))
        return copy.deepcopy(payload)

    def _revise(self, **changes: Any) -> RouteIntentBuilder:
        updated = dataclasses.replace(self._entry, **changes)
        self._registry.revise(self._entry, updated)
        self._entry = updated
        return self


def intent(
    route: Any,
    name: str,
    *,
    registry: IntentRegistry | None = None,
) -> RouteIntentBuilder:
    """Attach intent documentation to *route*."""
    return RouteIntentBuilder(route, name, registry=registry)


def install(
    route_class: type,
    *,
    attribute: str = "intent",
    registry: IntentRegistry | None = None,
) -> type:
    """Extend *route_class* with an ``intent(name)`` method.

    The registry is resolved when each builder is constructed, so a
    cleared or swapped default registry is honoured.
    """

    def attach(self: Any, name: str) -> RouteIntentBuilder:
        return RouteIntentBuilder(self, name, registry=registry)

    attach.__name__ = attribute
    attach.__qualname__ = f"{route_class.__name__}.{attribute}"
    attach.__doc__ = "Attach intent documentation to this route."
    setattr(route_class, attribute, attach)
    logger.debug("route_extension_installed", route_class=route_class.__name__, attribute=attribute)
    return route_class


def uninstall(route_class: type, attribute: str = "intent") -> None:
    """Remove an extension added by :func:`install`."""
    if attribute in vars(route_class):
        delattr(route_class, attribute)
