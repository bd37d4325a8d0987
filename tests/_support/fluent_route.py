"""
A minimal fluent routing API used as the host framework in tests.

Mirrors the shape of chainable route declarations: ``router.get(...)``
returns a route whose configuration methods return the route itself, so
calls can be chained after ``.intent(...)``.
"""

from __future__ import annotations

from typing import Any

from intentdoc import install


class FluentRoute:
    def __init__(self, methods: list[str], uri: str, action: Any = None):
        self._methods = list(methods)
        self._uri = uri
        self._action = action
        self._middleware: list[str] = []
        self._name: str | None = None

    def methods(self) -> list[str]:
        return self._methods

    def uri(self) -> str:
        return self._uri

    def middleware(self, *names: str) -> Any:
        if not names:
            return list(self._middleware)
        self._middleware.extend(names)
        return self

    def name(self, name: str) -> FluentRoute:
        self._name = name
        return self

    def get_name(self) -> str | None:
        return self._name


class FluentRouter:
    def __init__(self) -> None:
        self.routes: list[FluentRoute] = []

    def _add(self, methods: list[str], uri: str, action: Any) -> FluentRoute:
        route = FluentRoute(methods, uri, action)
        self.routes.append(route)
        return route

    def get(self, uri: str, action: Any = None) -> FluentRoute:
        return self._add(["GET", "HEAD"], uri, action)

    def post(self, uri: str, action: Any = None) -> FluentRoute:
        return self._add(["POST"], uri, action)

    def put(self, uri: str, action: Any = None) -> FluentRoute:
        return self._add(["PUT"], uri, action)

    def delete(self, uri: str, action: Any = None) -> FluentRoute:
        return self._add(["DELETE"], uri, action)


install(FluentRoute)
