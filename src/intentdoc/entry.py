"""Documentation entry — the canonical record of one documented route.

Manifesto:
    Every formatter, the registry snapshot and the JSON document share one
    seven-field shape. ``IntentEntry`` is that shape as a frozen value;
    ``normalize_entry`` turns either an entry or a loose mapping into the
    plain-dict form with every optional field defaulted, never omitted.

Tags:
    intentdoc, data-model, dataclass, serialization

Doc-Types:
    api-reference
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from intentdoc.core.errors import InvalidIntentError

#: Key order of the serialized entry; also the JSON document's key order.
ENTRY_FIELDS: tuple[str, ...] = (
    "name",
    "description",
    "method",
    "endpoint",
    "rules",
    "request",
    "response",
)


@dataclass(frozen=True)
class IntentEntry:
    """One documented API operation.

    Attributes:
        name: Human label, required and non-empty.
        description: Free-text description.
        method: HTTP verb captured from the route, or ``None``.
        endpoint: Normalised route path, or ``None``.
        rules: Business constraints in display order.
        request: Illustrative request payload (JSON-like).
        response: Illustrative response payload (JSON-like).
    """

    name: str
    description: str = ""
    method: str | None = None
    endpoint: str | None = None
    rules: tuple[Any, ...] = ()
    request: Any = field(default_factory=dict)
    response: Any = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidIntentError(
                "Intent name must be a non-empty string",
                name=repr(self.name),
            )
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))

    def to_dict(self) -> dict[str, Any]:
        """Plain, detached dict with all seven fields."""
        return {
            "name": self.name,
            "description": self.description,
            "method": self.method,
            "endpoint": self.endpoint,
            "rules": list(copy.deepcopy(self.rules)),
            "request": copy.deepcopy(self.request),
            "response": copy.deepcopy(self.response),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IntentEntry:
        """Build an entry from a serialized mapping, defaulting absent fields."""
        normalized = normalize_entry(data)
        return cls(
            name=normalized["name"],
            description=normalized["description"],
            method=normalized["method"],
            endpoint=normalized["endpoint"],
            rules=tuple(normalized["rules"]),
            request=normalized["request"],
            response=normalized["response"],
        )


def normalize_entry(entry: IntentEntry | Mapping[str, Any]) -> dict[str, Any]:
    """Return the seven-field plain-dict form of *entry*.

    Missing or ``None`` optional fields become ``""`` / ``[]`` / ``{}``;
    ``method`` and ``endpoint`` stay ``None`` when absent. Values are
    copied so callers can never mutate the source.
    """
    if isinstance(entry, IntentEntry):
        return entry.to_dict()

    rules = entry.get("rules")
    if rules is None:
        rules = []
    elif isinstance(rules, (str, bytes)) or not hasattr(rules, "__iter__"):
        rules = [rules]

    request = entry.get("request")
    response = entry.get("response")
    description = entry.get("description")

    return {
        "name": entry.get("name", ""),
        "description": "" if description is None else description,
        "method": entry.get("method"),
        "endpoint": entry.get("endpoint"),
        "rules": list(copy.deepcopy(list(rules))),
        "request": {} if request is None else copy.deepcopy(request),
        "response": {} if response is None else copy.deepcopy(response),
    }


def normalize_path(path: Any) -> str | None:
    """Leading-slash form of a route path; parameters are kept verbatim."""
    if path is None:
        return None
    return "/" + str(path).lstrip("/")
