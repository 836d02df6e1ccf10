"""Test configuration and fixtures for cl_media_handler.

This module provides:
- Factories for in-memory assets and renditions
- A fresh RenditionHandler per test
- Pillow-generated image directories for the local store
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from cl_media_handler import MediaFormat, RenditionHandler
from cl_media_handler.stores import InMemoryAsset, InMemoryRendition

AssetFactory = Callable[..., InMemoryAsset]


# ============================================================================
# In-memory assets
# ============================================================================


def rendition(name: str, width: int | None = None, height: int | None = None) -> InMemoryRendition:
    return InMemoryRendition(name=name, width=width, height=height, handle=f"store://{name}")


@pytest.fixture
def make_asset() -> AssetFactory:
    """Build an InMemoryAsset from (name, width, height) tuples."""

    def _make(
        *renditions: tuple[str, int | None, int | None],
        asset_id: str = "asset-1",
        original_name: str | None = None,
    ) -> InMemoryAsset:
        return InMemoryAsset(
            asset_id=asset_id,
            renditions=tuple(rendition(n, w, h) for n, w, h in renditions),
            original_name=original_name,
        )

    return _make


@pytest.fixture
def photo_asset(make_asset: AssetFactory) -> InMemoryAsset:
    """4:3 photo with a few stored renditions and the usual asset thumbnails."""
    return make_asset(
        ("original.jpg", 1600, 1200),
        ("web.jpg", 800, 600),
        ("square.jpg", 300, 300),
        ("preview.png", 400, 300),
        ("cq5dam.thumbnail.48.48.png", 48, 36),
        ("cq5dam.thumbnail.140.100.png", 140, 105),
        ("manual.pdf", None, None),
        original_name="original.jpg",
    )


@pytest.fixture
def handler() -> RenditionHandler:
    return RenditionHandler()


# ============================================================================
# Media formats
# ============================================================================


@pytest.fixture
def teaser_format() -> MediaFormat:
    return MediaFormat(name="teaser", width=400, height=300, extensions=("jpg", "png"))


@pytest.fixture
def wide_format() -> MediaFormat:
    return MediaFormat(name="wide", min_width=640, ratio=16 / 9, extensions=("jpg",))


# ============================================================================
# Local files
# ============================================================================


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Directory with two JPEG renditions, a PNG and a non-image file."""
    asset_dir = tmp_path / "asset"
    asset_dir.mkdir()
    Image.new("RGB", (640, 480), color=(200, 30, 30)).save(asset_dir / "original.jpg")
    Image.new("RGB", (320, 240), color=(30, 200, 30)).save(asset_dir / "medium.jpg")
    Image.new("RGBA", (64, 64), color=(30, 30, 200, 255)).save(asset_dir / "icon.png")
    _ = (asset_dir / "readme.txt").write_text("not an image", encoding="utf-8")
    return asset_dir
