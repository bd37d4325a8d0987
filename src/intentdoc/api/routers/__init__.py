"""HTTP routers exposed by intentdoc."""

from intentdoc.api.routers import intent_doc

__all__ = ["intent_doc"]
