"""Tests for intentdoc.generator — collecting, rendering and writing docs."""

from __future__ import annotations

import json

import pytest

from intentdoc.core.errors import ArtifactWriteError, UnknownFormatError
from intentdoc.entry import IntentEntry
from intentdoc.formatters import JsonFormatter
from intentdoc.formatters.html_formatter import embeddable_json
from intentdoc.generator import (
    HTML_ARTIFACT,
    JSON_ARTIFACT,
    GenerationStatus,
    IntentDocGenerator,
)
from intentdoc.loader import RouteLoader

SAMPLE = "tests._support.sample_routes"


@pytest.fixture
def make_generator(settings, fixed_time):
    def _make(modules=(), **kwargs):
        kwargs.setdefault("loader", RouteLoader(modules))
        return IntentDocGenerator(settings=settings, clock=lambda: fixed_time, **kwargs)

    return _make


class TestEmptyCatalog:
    def test_nothing_written(self, make_generator, tmp_path):
        result = make_generator().generate()

        assert result.status is GenerationStatus.EMPTY
        assert not result.success
        assert result.entry_count == 0
        assert result.artifacts == []
        assert not (tmp_path / "intent-doc").exists()

    def test_explicit_output_not_written(self, make_generator, tmp_path):
        target = tmp_path / "docs.md"
        result = make_generator().generate(output=target, format="markdown")

        assert result.status is GenerationStatus.EMPTY
        assert not target.exists()

    def test_load_failures_reported(self, make_generator):
        result = make_generator(["tests._support.does_not_exist"]).generate()
        assert result.load_report.failed_sources == ["tests._support.does_not_exist"]


class TestDefaultMode:
    def test_writes_json_and_html(self, make_generator, tmp_path):
        result = make_generator([SAMPLE]).generate()

        directory = tmp_path / "intent-doc"
        assert result.success
        assert result.entry_count == 3
        assert result.artifacts == [directory / JSON_ARTIFACT, directory / HTML_ARTIFACT]
        assert all(path.is_file() for path in result.artifacts)

    def test_json_artifact(self, make_generator, tmp_path):
        make_generator([SAMPLE]).generate()

        document = json.loads((tmp_path / "intent-doc" / JSON_ARTIFACT).read_text(encoding="utf-8"))
        assert document["generated_at"] == "2026-01-15T12:00:00+00:00"
        assert [e["name"] for e in document["endpoints"]] == ["Show Order", "List Users", "Create User"]

    def test_html_embeds_written_json(self, make_generator, tmp_path):
        make_generator([SAMPLE]).generate()

        directory = tmp_path / "intent-doc"
        document = (directory / JSON_ARTIFACT).read_text(encoding="utf-8")
        page = (directory / HTML_ARTIFACT).read_text(encoding="utf-8")
        assert embeddable_json(document) in page

    def test_uses_configured_directory(self, settings, fixed_time, tmp_path):
        settings = settings.model_copy(update={"output_dir": "build/docs"})
        generator = IntentDocGenerator(settings=settings, loader=RouteLoader([SAMPLE]), clock=lambda: fixed_time)

        result = generator.generate()

        assert result.artifacts[0] == tmp_path / "build" / "docs" / JSON_ARTIFACT

    def test_overwrites_previous_run(self, make_generator, tmp_path):
        target = tmp_path / "intent-doc" / JSON_ARTIFACT
        target.parent.mkdir()
        target.write_text("stale", encoding="utf-8")

        make_generator([SAMPLE]).generate()

        assert target.read_text(encoding="utf-8").startswith("{")

    def test_directory_is_a_file(self, make_generator, tmp_path):
        (tmp_path / "intent-doc").write_text("not a directory", encoding="utf-8")

        with pytest.raises(ArtifactWriteError) as exc_info:
            make_generator([SAMPLE]).generate()

        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.category.value == "STORAGE"


class TestExplicitOutput:
    def test_json_by_default(self, make_generator, tmp_path):
        target = tmp_path / "api.json"
        result = make_generator([SAMPLE]).generate(output=target)

        assert result.artifacts == [target]
        assert len(JsonFormatter.decode_entries(target.read_text(encoding="utf-8"))) == 3

    def test_markdown(self, make_generator, tmp_path):
        target = tmp_path / "API.md"
        make_generator([SAMPLE]).generate(output=str(target), format="formatted-text")

        text = target.read_text(encoding="utf-8")
        assert text.startswith("# API Documentation\n")
        assert "## Create User" in text
        assert "**Endpoint:** `POST /users`" in text

    def test_html(self, make_generator, tmp_path):
        target = tmp_path / "page.html"
        make_generator([SAMPLE]).generate(output=target, format="html")
        assert "const documentation = " in target.read_text(encoding="utf-8")

    def test_creates_parent_directories(self, make_generator, tmp_path):
        target = tmp_path / "nested" / "dir" / "api.json"
        make_generator([SAMPLE]).generate(output=target)
        assert target.is_file()

    def test_only_requested_file_written(self, make_generator, tmp_path):
        make_generator([SAMPLE]).generate(output=tmp_path / "api.md", format="md")
        assert not (tmp_path / "intent-doc").exists()

    def test_unknown_format_fails_before_loading(self, settings, tmp_path):
        calls = []
        generator = IntentDocGenerator(settings=settings, loader=RouteLoader(finalize=lambda: calls.append(1)))

        with pytest.raises(UnknownFormatError):
            generator.generate(output=tmp_path / "api.pdf", format="pdf")

        assert calls == []
        assert not (tmp_path / "api.pdf").exists()

    def test_parent_is_a_file(self, make_generator, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(ArtifactWriteError) as exc_info:
            make_generator([SAMPLE]).generate(output=blocker / "api.json")

        assert exc_info.value.context["path"] == blocker


class TestCollect:
    def test_returns_snapshot_and_report(self, make_generator):
        generator = make_generator([SAMPLE])
        entries = generator.collect()

        assert len(entries) == 3
        assert generator.last_load_report.ok

    def test_private_registry(self, make_generator, registry):
        registry.register(IntentEntry(name="Only Here"))
        generator = make_generator(registry=registry)

        assert [e["name"] for e in generator.collect()] == ["Only Here"]

    def test_default_settings_used(self, monkeypatch):
        monkeypatch.setenv("INTENTDOC_ROUTE_MODULES", f'["{SAMPLE}"]')
        generator = IntentDocGenerator()
        assert generator.loader.modules == [SAMPLE]
