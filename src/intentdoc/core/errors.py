"""
Structured error types for intentdoc.

Every failure intentdoc raises on purpose is an :class:`IntentDocError`
carrying a category, structured context and an optional chained cause,
so the CLI and the web layer can report it without string matching.

Manifesto:
    - **Typed hierarchy:** One subclass per failure domain
    - **Rich context:** Errors carry the source, path or format involved
    - **Error chaining:** The original exception is preserved as ``cause``
    - **Outcomes are not errors:** An empty catalog is a generation status,
      never an exception

Architecture:
    ::

        ┌───────────────────────────────────────────────────────┐
        │                    IntentDocError                      │
        │            (category, context, cause)                  │
        ├───────────────────────────────────────────────────────┤
        │  InvalidIntentError   UnknownFormatError   (VALIDATION)│
        │  SourceLoadError                           (SOURCE)    │
        │  ArtifactWriteError                        (STORAGE)   │
        │  InvalidConfigError                        (CONFIG)    │
        └───────────────────────────────────────────────────────┘

Examples:
    >>> err = ArtifactWriteError("cannot write", path="/ro/api-doc.json")
    >>> err.category.value
    'STORAGE'
    >>> err.to_dict()["context"]["path"]
    '/ro/api-doc.json'

Tags:
    error-handling, exception-hierarchy, error-context, intentdoc

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories used for reporting and exit codes."""

    VALIDATION = "VALIDATION"
    SOURCE = "SOURCE"
    STORAGE = "STORAGE"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


class IntentDocError(Exception):
    """Base exception for all intentdoc errors.

    Subclasses set ``default_category``; callers attach structured
    metadata through keyword arguments or :meth:`with_context`.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: BaseException | None = None,
        **context: Any,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context)
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> IntentDocError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = {k: str(v) for k, v in self.context.items()}
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class InvalidIntentError(IntentDocError, ValueError):
    """An intent was declared with an empty or non-string name."""

    default_category = ErrorCategory.VALIDATION


class UnknownFormatError(IntentDocError, ValueError):
    """The requested output format has no formatter."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, requested: Any, choices: list[str] | None = None):
        self.requested = requested
        self.choices = choices or []
        available = ", ".join(self.choices) if self.choices else "(none)"
        super().__init__(
            f"Unknown format '{requested}'. Available: {available}",
            requested=requested,
        )


# =============================================================================
# SOURCE / STORAGE ERRORS
# =============================================================================


class SourceLoadError(IntentDocError):
    """A route-declaration source failed during forced evaluation.

    Never raised out of the loader; instances are recorded in
    :class:`~intentdoc.loader.LoadReport` so one broken module does not
    hide the others.
    """

    default_category = ErrorCategory.SOURCE


class ArtifactWriteError(IntentDocError):
    """Creating the output directory or writing an artifact failed."""

    default_category = ErrorCategory.STORAGE


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class InvalidConfigError(IntentDocError, ValueError):
    """A setting or mount option cannot be used as given."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "IntentDocError",
    "InvalidIntentError",
    "UnknownFormatError",
    "SourceLoadError",
    "ArtifactWriteError",
    "InvalidConfigError",
]
