from __future__ import annotations

from functools import cached_property
from os import PathLike
from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..errors import AssetStoreError
from .memory import ORIGINAL_RENDITION_NAME


class LocalRendition:
    """A rendition file on disk. Dimensions are read from the image header on first use."""

    def __init__(self, path: Path):
        self.path: Path = path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def handle(self) -> Path:
        return self.path

    @cached_property
    def _size(self) -> tuple[int, int] | None:
        try:
            with Image.open(self.path) as img:
                return img.size
        except (UnidentifiedImageError, OSError) as e:
            logger.warning(f"Cannot read image size of {self.path}: {e}")
            return None

    @property
    def width(self) -> int | None:
        return self._size[0] if self._size else None

    @property
    def height(self) -> int | None:
        return self._size[1] if self._size else None

    def __repr__(self) -> str:
        return f"LocalRendition({str(self.path)!r})"


class LocalDirectoryAsset:
    """
    Asset whose renditions are the files of one directory.

    Layout:
        directory/
            original.<ext>        original rendition
            <rendition files>
    """

    def __init__(self, directory: str | PathLike[str], asset_id: str | None = None):
        self._directory: Path = Path(directory).expanduser().resolve()
        if not self._directory.is_dir():
            raise AssetStoreError(str(self._directory), "not a directory")
        self._asset_id: str = asset_id or str(self._directory)

    @property
    def asset_id(self) -> str:
        return self._asset_id

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def path(self) -> str:
        return str(self._directory)

    @property
    def title(self) -> str:
        return self._directory.name

    @cached_property
    def renditions(self) -> tuple[LocalRendition, ...]:
        try:
            files = sorted(p for p in self._directory.iterdir() if p.is_file())
        except OSError as e:
            raise AssetStoreError(str(self._directory), str(e)) from e
        return tuple(LocalRendition(p) for p in files)

    @property
    def original(self) -> LocalRendition | None:
        for rendition in self.renditions:
            if rendition.path.stem == ORIGINAL_RENDITION_NAME:
                return rendition
        return None
