"""Media format catalog - named MediaFormat definitions.

Formats can be registered in code, loaded from a JSON file or discovered
from providers declared as entry points::

    [project.entry-points."cl_media_handler.media_formats"]
    my_app = "my_app.media:media_formats"

where ``media_formats`` is a callable returning an iterable of MediaFormat.
"""

from collections.abc import Callable, Iterable, Iterator
from importlib.metadata import entry_points
from os import PathLike
from pathlib import Path
from typing import ClassVar, cast

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .common.schemas import MediaFormat
from .errors import DuplicateMediaFormatError, UnknownMediaFormatError

ENTRY_POINT_GROUP = "cl_media_handler.media_formats"

MediaFormatProvider = Callable[[], Iterable[MediaFormat]]


class MediaFormatConfig(BaseModel):
    """On-disk layout of a media format catalog file."""

    media_formats: list[MediaFormat] = Field(default_factory=list)

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


class MediaFormatCatalog:
    """Registry of media formats, looked up by name."""

    def __init__(self, media_formats: Iterable[MediaFormat] = ()):
        self._formats: dict[str, MediaFormat] = {}
        for media_format in media_formats:
            self.register(media_format)

    def register(self, media_format: MediaFormat) -> None:
        if media_format.name in self._formats:
            raise DuplicateMediaFormatError(media_format.name)
        self._formats[media_format.name] = media_format

    def get(self, name: str) -> MediaFormat:
        try:
            return self._formats[name]
        except KeyError:
            raise UnknownMediaFormatError(name) from None

    def resolve(self, *names: str) -> tuple[MediaFormat, ...]:
        """Look up several formats, keeping the given order."""
        return tuple(self.get(name) for name in names)

    def names(self) -> list[str]:
        return list(self._formats)

    def __contains__(self, name: object) -> bool:
        return name in self._formats

    def __iter__(self) -> Iterator[MediaFormat]:
        return iter(self._formats.values())

    def __len__(self) -> int:
        return len(self._formats)

    @classmethod
    def from_json(cls, path: str | PathLike[str]) -> "MediaFormatCatalog":
        """Load a catalog from ``{"media_formats": [...]}`` JSON.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If any format is invalid
        """
        config = MediaFormatConfig.model_validate_json(Path(path).read_text(encoding="utf-8"))
        catalog = cls(config.media_formats)
        logger.debug(f"Loaded {len(catalog)} media formats from {path}")
        return catalog

    @classmethod
    def from_entry_points(cls, group: str = ENTRY_POINT_GROUP) -> "MediaFormatCatalog":
        """Collect formats from all providers registered under ``group``.

        Raises:
            RuntimeError: If a provider fails to load or returns invalid data
        """
        catalog = cls()
        for ep in entry_points(group=group):
            try:
                provider = cast(MediaFormatProvider, ep.load())
                for media_format in provider():
                    catalog.register(media_format)
            except DuplicateMediaFormatError:
                raise
            except Exception as e:
                logger.warning(f"Media format provider '{ep.name}' failed: {e}")
                raise RuntimeError(f"Failed to load media format provider '{ep.name}': {e}") from e
        return catalog
