"""Rendition metadata: concrete stored renditions and virtual (derived) ones.

Both variants share the same projection (name, width, height, file extension,
handle) and ordering, and are told apart by the ``kind`` discriminator.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, Field

from ..utils.media_types import file_extension, ratio_matches
from .asset_source import RenditionSource
from .schemas import CropDimension, MediaFormat


def _dimension(value: int | None) -> int:
    if value is None or value < 0:
        return 0
    return int(value)


class _RenditionBase(BaseModel):
    name: str
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    handle: object = None
    media_format: MediaFormat | None = Field(
        default=None,
        description="Media format this rendition was matched against, if any",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def file_extension(self) -> str:
        return file_extension(self.name)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def ratio(self) -> float:
        if self.width <= 0 or self.height <= 0:
            return 0.0
        return self.width / self.height

    @property
    def sort_key(self) -> tuple[int, str]:
        return (self.area, self.name)

    # Ordering is by size only; equality stays field-wise.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _RenditionBase):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _RenditionBase):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _RenditionBase):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _RenditionBase):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def matches_size(self, width: int, height: int) -> bool:
        """Exact size check; a 0 argument means "any" for that axis."""
        if width > 0 and self.width != width:
            return False
        if height > 0 and self.height != height:
            return False
        return True

    def matches_bounds(
        self,
        min_width: int,
        min_height: int,
        max_width: int,
        max_height: int,
        ratio: float,
    ) -> bool:
        """Check size bounds (0 = unbounded) and, if ratio > 0, the aspect ratio."""
        if min_width > 0 and self.width < min_width:
            return False
        if min_height > 0 and self.height < min_height:
            return False
        if max_width > 0 and self.width > max_width:
            return False
        if max_height > 0 and self.height > max_height:
            return False
        if ratio > 0 and not ratio_matches(self.ratio, ratio):
            return False
        return True

    def with_media_format(self, media_format: MediaFormat | None) -> Self:
        return self.model_copy(update={"media_format": media_format})


class RenditionMetadata(_RenditionBase):
    """A rendition that exists in the content store."""

    kind: Literal["rendition"] = "rendition"

    @classmethod
    def from_source(cls, source: RenditionSource) -> RenditionMetadata:
        return cls(
            name=source.name,
            width=_dimension(source.width),
            height=_dimension(source.height),
            handle=source.handle,
        )


class VirtualRenditionMetadata(_RenditionBase):
    """Target size to be scaled down from an existing rendition.

    ``name`` and ``handle`` point at the source rendition; ``width`` and
    ``height`` are the target size and are always positive.
    """

    kind: Literal["virtual"] = "virtual"
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    source_width: int = Field(default=0, ge=0)
    source_height: int = Field(default=0, ge=0)
    crop: CropDimension | None = None


AnyRendition = Annotated[
    RenditionMetadata | VirtualRenditionMetadata,
    Field(discriminator="kind"),
]
