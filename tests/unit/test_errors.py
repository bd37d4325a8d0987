"""Tests for intentdoc.core.errors."""

from __future__ import annotations

import pytest

from intentdoc.core.errors import (
    ArtifactWriteError,
    ErrorCategory,
    IntentDocError,
    InvalidConfigError,
    InvalidIntentError,
    SourceLoadError,
    UnknownFormatError,
)


class TestIntentDocError:
    def test_default_category(self):
        assert IntentDocError("boom").category is ErrorCategory.INTERNAL

    def test_explicit_category(self):
        err = IntentDocError("boom", category=ErrorCategory.CONFIG)
        assert err.category is ErrorCategory.CONFIG

    def test_context_and_cause(self):
        cause = OSError("disk full")
        err = ArtifactWriteError("cannot write", cause=cause, path="/tmp/api-doc.json")

        assert err.context == {"path": "/tmp/api-doc.json"}
        assert err.cause is cause
        assert err.__cause__ is cause
        assert str(err) == "cannot write"

    def test_with_context_is_fluent(self):
        err = SourceLoadError("failed").with_context(source="app.routes")
        assert err.context["source"] == "app.routes"

    def test_to_dict(self):
        err = ArtifactWriteError("cannot write", cause=OSError("denied"), path="/ro")

        assert err.to_dict() == {
            "error_type": "ArtifactWriteError",
            "message": "cannot write",
            "category": "STORAGE",
            "context": {"path": "/ro"},
            "cause": "denied",
        }

    def test_to_dict_minimal(self):
        assert IntentDocError("x").to_dict() == {
            "error_type": "IntentDocError",
            "message": "x",
            "category": "INTERNAL",
        }

    def test_repr(self):
        assert repr(SourceLoadError("nope")) == "SourceLoadError('nope', category=SOURCE)"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error_cls", "category"),
        [
            (InvalidIntentError, ErrorCategory.VALIDATION),
            (SourceLoadError, ErrorCategory.SOURCE),
            (ArtifactWriteError, ErrorCategory.STORAGE),
            (InvalidConfigError, ErrorCategory.CONFIG),
        ],
    )
    def test_categories(self, error_cls, category):
        err = error_cls("x")
        assert isinstance(err, IntentDocError)
        assert err.category is category

    def test_validation_errors_are_value_errors(self):
        assert issubclass(InvalidIntentError, ValueError)
        assert issubclass(UnknownFormatError, ValueError)
        assert issubclass(InvalidConfigError, ValueError)

    def test_unknown_format_message(self):
        err = UnknownFormatError("pdf", ["html", "json"])

        assert err.message == "Unknown format 'pdf'. Available: html, json"
        assert err.context == {"requested": "pdf"}
        assert err.category is ErrorCategory.VALIDATION

    def test_unknown_format_without_choices(self):
        assert UnknownFormatError("pdf").message.endswith("Available: (none)")
