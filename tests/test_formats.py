"""Unit tests for the media format catalog."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from cl_media_handler import (
    DuplicateMediaFormatError,
    MediaFormat,
    MediaFormatCatalog,
    UnknownMediaFormatError,
)
from cl_media_handler import formats as formats_module

# ============================================================================
# Registration and lookup
# ============================================================================


def test_register_and_get(teaser_format: MediaFormat, wide_format: MediaFormat):
    catalog = MediaFormatCatalog([teaser_format, wide_format])

    assert catalog.get("teaser") is teaser_format
    assert "wide" in catalog
    assert "missing" not in catalog
    assert catalog.names() == ["teaser", "wide"]
    assert list(catalog) == [teaser_format, wide_format]
    assert len(catalog) == 2


def test_duplicate_name_rejected(teaser_format: MediaFormat):
    catalog = MediaFormatCatalog([teaser_format])

    with pytest.raises(DuplicateMediaFormatError) as exc_info:
        catalog.register(MediaFormat(name="teaser", width=10))

    assert exc_info.value.name == "teaser"


def test_unknown_name(teaser_format: MediaFormat):
    catalog = MediaFormatCatalog([teaser_format])

    with pytest.raises(UnknownMediaFormatError) as exc_info:
        _ = catalog.get("hero")

    assert exc_info.value.name == "hero"
    assert str(exc_info.value) == "Unknown media format 'hero'"


def test_resolve_keeps_order(teaser_format: MediaFormat, wide_format: MediaFormat):
    catalog = MediaFormatCatalog([teaser_format, wide_format])

    assert catalog.resolve("wide", "teaser") == (wide_format, teaser_format)


# ============================================================================
# JSON configuration
# ============================================================================


def test_from_json(tmp_path: Path):
    config = tmp_path / "media_formats.json"
    _ = config.write_text(
        json.dumps(
            {
                "media_formats": [
                    {"name": "teaser", "width": 400, "height": 300, "extensions": ["jpg"]},
                    {"name": "hero", "min_width": 1200, "ratio_width": 21, "ratio_height": 9},
                ]
            }
        ),
        encoding="utf-8",
    )

    catalog = MediaFormatCatalog.from_json(config)

    assert catalog.names() == ["teaser", "hero"]
    assert catalog.get("teaser").extensions == ("jpg",)
    assert catalog.get("hero").effective_ratio == pytest.approx(21 / 9)


def test_from_json_invalid_format(tmp_path: Path):
    config = tmp_path / "media_formats.json"
    _ = config.write_text(
        json.dumps({"media_formats": [{"name": "bad", "ratio": -1}]}),
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        _ = MediaFormatCatalog.from_json(config)


def test_from_json_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        _ = MediaFormatCatalog.from_json(tmp_path / "missing.json")


# ============================================================================
# Entry point providers
# ============================================================================


class FakeEntryPoint:
    def __init__(self, name: str, target: object):
        self.name: str = name
        self._target: object = target

    def load(self) -> object:
        if isinstance(self._target, Exception):
            raise self._target
        return self._target


def test_from_entry_points(monkeypatch: pytest.MonkeyPatch, teaser_format: MediaFormat):
    groups: list[str] = []

    def fake_entry_points(group: str):
        groups.append(group)
        return [FakeEntryPoint("app", lambda: [teaser_format])]

    monkeypatch.setattr(formats_module, "entry_points", fake_entry_points)

    catalog = MediaFormatCatalog.from_entry_points()

    assert groups == ["cl_media_handler.media_formats"]
    assert catalog.get("teaser") is teaser_format


def test_from_entry_points_failing_provider(monkeypatch: pytest.MonkeyPatch):
    def fake_entry_points(group: str):
        return [FakeEntryPoint("broken", ImportError("No module named 'missing'"))]

    monkeypatch.setattr(formats_module, "entry_points", fake_entry_points)

    with pytest.raises(RuntimeError, match="broken"):
        _ = MediaFormatCatalog.from_entry_points()


def test_from_entry_points_duplicate_across_providers(
    monkeypatch: pytest.MonkeyPatch, teaser_format: MediaFormat
):
    def fake_entry_points(group: str):
        return [
            FakeEntryPoint("a", lambda: [teaser_format]),
            FakeEntryPoint("b", lambda: [teaser_format]),
        ]

    monkeypatch.setattr(formats_module, "entry_points", fake_entry_points)

    with pytest.raises(DuplicateMediaFormatError):
        _ = MediaFormatCatalog.from_entry_points()
