"""Ambient primitives shared by every intentdoc module: errors, logging, settings."""

from intentdoc.core.errors import (
    ArtifactWriteError,
    ErrorCategory,
    IntentDocError,
    InvalidConfigError,
    InvalidIntentError,
    SourceLoadError,
    UnknownFormatError,
)
from intentdoc.core.logging import LogContext, configure_logging, get_logger
from intentdoc.core.settings import IntentDocSettings, find_project_root, get_settings

__all__ = [
    "ArtifactWriteError",
    "ErrorCategory",
    "IntentDocError",
    "InvalidConfigError",
    "InvalidIntentError",
    "SourceLoadError",
    "UnknownFormatError",
    "LogContext",
    "configure_logging",
    "get_logger",
    "IntentDocSettings",
    "find_project_root",
    "get_settings",
]
