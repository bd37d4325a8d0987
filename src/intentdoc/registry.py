"""Intent registry — the process-wide catalog of documented routes.

Manifesto:
    Route declarations run in many modules during bootstrap. The registry
    is the single ordered list they all append to, and the single source
    every formatter, the web router and the CLI read from.

ARCHITECTURE
────────────
::

    IntentRegistry.register(entry)          → append (never rejects, never dedups)
    IntentRegistry.revise(current, updated) → replace the slot owned by a builder
    IntentRegistry.all()                    → list[dict] snapshot, commit order
    IntentRegistry.clear()                  → reset (for testing)

    get_registry()   → process-wide default instance
    clear_registry() → clear the default instance

BEST PRACTICES
──────────────
- Call ``clear_registry()`` in test fixtures to avoid leaks.
- Pass ``registry=`` explicitly when a component must not touch the
  process-wide catalog (tests, embedded generators).

Tags:
    intentdoc, registry, catalog, thread-safe

Doc-Types:
    api-reference
"""

from __future__ import annotations

import threading
from typing import Any

from intentdoc.core.logging import get_logger
from intentdoc.entry import IntentEntry

logger = get_logger(__name__)


class IntentRegistry:
    """Thread-safe, ordered, append-only store of intent entries.

    Entries with the same name coexist; order is commit order. Individual
    entries are never removed, only the whole registry can be cleared.
    """

    def __init__(self) -> None:
        self._entries: list[IntentEntry] = []
        self._lock = threading.Lock()

    def register(self, entry: IntentEntry) -> IntentEntry:
        """Append *entry* and return it."""
        with self._lock:
            self._entries.append(entry)
            position = len(self._entries)

        logger.debug(
            "intent_registered",
            name=entry.name,
            method=entry.method,
            endpoint=entry.endpoint,
            position=position,
        )
        return entry

    def revise(self, current: IntentEntry, updated: IntentEntry) -> bool:
        """Replace the slot holding *current* (by identity) with *updated*.

        Returns ``False`` when the slot is gone, which only happens after
        :meth:`clear`.
        """
        with self._lock:
            for index, existing in enumerate(self._entries):
                if existing is current:
                    self._entries[index] = updated
                    return True
        logger.debug("intent_revision_dropped", name=current.name)
        return False

    def all(self) -> list[dict[str, Any]]:
        """Snapshot of every entry as plain dicts, in commit order."""
        with self._lock:
            entries = list(self._entries)
        return [entry.to_dict() for entry in entries]

    def entries(self) -> tuple[IntentEntry, ...]:
        """Snapshot of the entry values, in commit order."""
        with self._lock:
            return tuple(self._entries)

    def clear(self) -> None:
        """Empty the registry. Intended for test isolation."""
        with self._lock:
            self._entries.clear()
        logger.debug("intent_registry_cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"IntentRegistry(entries={len(self)})"


_default_registry = IntentRegistry()


def get_registry() -> IntentRegistry:
    """Return the process-wide registry."""
    return _default_registry


def clear_registry() -> None:
    """Clear the process-wide registry (for testing)."""
    _default_registry.clear()
