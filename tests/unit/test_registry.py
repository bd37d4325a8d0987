"""Tests for intentdoc.registry."""

from __future__ import annotations

import threading

from intentdoc.entry import IntentEntry
from intentdoc.registry import IntentRegistry, clear_registry, get_registry


class TestIntentRegistry:
    def test_register_single(self, registry):
        registry.register(IntentEntry(name="Test Intent"))
        assert len(registry.all()) == 1

    def test_preserves_commit_order(self, registry):
        for name in ("Intent 1", "Intent 2", "Intent 3"):
            registry.register(IntentEntry(name=name))
        assert [e["name"] for e in registry.all()] == ["Intent 1", "Intent 2", "Intent 3"]

    def test_same_name_not_deduplicated(self, registry):
        registry.register(IntentEntry(name="Show", endpoint="/a"))
        registry.register(IntentEntry(name="Show", endpoint="/b"))
        assert [e["endpoint"] for e in registry.all()] == ["/a", "/b"]

    def test_all_returns_plain_dicts(self, registry):
        registry.register(IntentEntry(name="Test Intent", description="Test description", method="GET"))
        first = registry.all()[0]
        assert isinstance(first, dict)
        assert first["name"] == "Test Intent"
        assert first["description"] == "Test description"
        assert first["method"] == "GET"

    def test_all_is_idempotent(self, registry):
        registry.register(IntentEntry(name="a", rules=("r",)))
        assert registry.all() == registry.all()

    def test_snapshot_mutation_does_not_leak(self, registry):
        registry.register(IntentEntry(name="a", rules=("r",)))
        snapshot = registry.all()
        snapshot[0]["rules"].append("injected")
        snapshot.clear()
        assert registry.all()[0]["rules"] == ["r"]

    def test_clear(self, registry):
        registry.register(IntentEntry(name="Intent 1"))
        registry.register(IntentEntry(name="Intent 2"))
        assert len(registry) == 2
        registry.clear()
        assert registry.all() == []

    def test_revise_replaces_slot(self, registry):
        first = registry.register(IntentEntry(name="a"))
        registry.register(IntentEntry(name="b"))
        assert registry.revise(first, IntentEntry(name="a", description="updated")) is True
        assert [e["description"] for e in registry.all()] == ["updated", ""]

    def test_revise_after_clear_is_dropped(self, registry):
        entry = registry.register(IntentEntry(name="a"))
        registry.clear()
        assert registry.revise(entry, IntentEntry(name="a", description="x")) is False
        assert registry.all() == []

    def test_entries_snapshot(self, registry):
        entry = registry.register(IntentEntry(name="a"))
        assert registry.entries() == (entry,)

    def test_concurrent_registration(self, registry):
        def worker(offset: int) -> None:
            for i in range(50):
                registry.register(IntentEntry(name=f"w{offset}-{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(registry) == 200


class TestDefaultRegistry:
    def test_is_process_wide(self):
        assert get_registry() is get_registry()

    def test_clear_registry(self):
        get_registry().register(IntentEntry(name="x"))
        clear_registry()
        assert len(get_registry()) == 0
