"""
Shared pytest fixtures for intentdoc tests.

This module provides:
- Registry cleanup for test isolation
- A fresh, private registry for unit tests
- Fixed timestamps for deterministic rendering
- Settings pointed at a temporary project root
"""

from __future__ import annotations

import sys
from collections.abc import Generator
from datetime import datetime, timezone
from pathlib import Path

import pytest

from intentdoc.core.settings import IntentDocSettings, get_settings
from intentdoc.entry import IntentEntry
from intentdoc.registry import IntentRegistry, clear_registry

ROUTE_PACKAGES = ("tests._support.sample_routes", "tests._support.broken_routes")


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_intent_registry() -> Generator[None, None, None]:
    """Clear the process-wide registry before and after each test."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture(autouse=True)
def forget_route_modules() -> Generator[None, None, None]:
    """Drop imported route modules so each test evaluates them afresh."""
    yield
    for name in list(sys.modules):
        if name.startswith(ROUTE_PACKAGES):
            del sys.modules[name]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for key in ("INTENTDOC_ROUTE_MODULES", "INTENTDOC_OUTPUT_DIR", "INTENTDOC_PROJECT_ROOT"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Building blocks
# =============================================================================


@pytest.fixture
def registry() -> IntentRegistry:
    """A private registry, independent of the process-wide one."""
    return IntentRegistry()


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings(tmp_path: Path) -> IntentDocSettings:
    return IntentDocSettings(project_root=tmp_path, _env_file=None)


@pytest.fixture
def sample_entries() -> list[IntentEntry]:
    return [
        IntentEntry(name="List Users", method="GET", endpoint="/users"),
        IntentEntry(
            name="Create User",
            description="Creates a new user account",
            method="POST",
            endpoint="/users",
            rules=("Email must be unique", "Password >= 8 chars"),
            request={"name": "John"},
            response={"id": 1},
        ),
    ]
