"""Pydantic schemas for media formats and resolution requests."""

from collections.abc import Sequence
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.media_types import normalize_extension


def _normalize_extensions(values: Sequence[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        ext = normalize_extension(value)
        if ext:
            seen.setdefault(ext, None)
    return tuple(seen)


# ─────────────────────────────────────────────────────────────
# Media format
# ─────────────────────────────────────────────────────────────


class MediaFormat(BaseModel):
    """Named set of size, ratio and file type constraints.

    All dimensions use 0 for "not set". A fixed ``width``/``height`` wins over
    the matching min/max bound when computing the effective bounds.
    """

    name: str = Field(..., min_length=1, description="Unique format name")
    label: str | None = Field(default=None, description="Human readable label")

    width: int = Field(default=0, ge=0, description="Fixed width in pixels")
    min_width: int = Field(default=0, ge=0)
    max_width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0, description="Fixed height in pixels")
    min_height: int = Field(default=0, ge=0)
    max_height: int = Field(default=0, ge=0)

    ratio: float = Field(default=0.0, ge=0, description="Aspect ratio (width / height)")
    ratio_width: float = Field(default=0.0, ge=0)
    ratio_height: float = Field(default=0.0, ge=0)

    extensions: tuple[str, ...] = Field(
        default=(),
        description="Allowed file extensions; empty means any",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _normalize_extensions(v)

    @model_validator(mode="after")
    def validate_bounds(self) -> "MediaFormat":
        if self.min_width and self.max_width and self.min_width > self.max_width:
            raise ValueError(
                f"min_width {self.min_width} exceeds max_width {self.max_width}"
            )
        if self.min_height and self.max_height and self.min_height > self.max_height:
            raise ValueError(
                f"min_height {self.min_height} exceeds max_height {self.max_height}"
            )
        if bool(self.ratio_width) != bool(self.ratio_height):
            raise ValueError("ratio_width and ratio_height must be set together")
        return self

    @property
    def effective_min_width(self) -> int:
        return self.width or self.min_width

    @property
    def effective_max_width(self) -> int:
        return self.width or self.max_width

    @property
    def effective_min_height(self) -> int:
        return self.height or self.min_height

    @property
    def effective_max_height(self) -> int:
        return self.height or self.max_height

    @property
    def effective_ratio(self) -> float:
        """Explicit ratio, else ratio_width/ratio_height, else width/height, else 0."""
        if self.ratio > 0:
            return self.ratio
        if self.ratio_width > 0 and self.ratio_height > 0:
            return self.ratio_width / self.ratio_height
        if self.width > 0 and self.height > 0:
            return self.width / self.height
        return 0.0

    @property
    def is_size_constrained(self) -> bool:
        return (
            self.effective_min_width > 0
            or self.effective_max_width > 0
            or self.effective_min_height > 0
            or self.effective_max_height > 0
            or self.effective_ratio > 0
        )


# ─────────────────────────────────────────────────────────────
# Crop region carried by virtual renditions
# ─────────────────────────────────────────────────────────────


class CropDimension(BaseModel):
    left: int = Field(default=0, ge=0)
    top: int = Field(default=0, ge=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


# ─────────────────────────────────────────────────────────────
# Resolution request
# ─────────────────────────────────────────────────────────────


class MediaArgs(BaseModel):
    """Caller supplied constraints for resolving a rendition.

    A fixed width/height, if either is set, takes precedence over any sizing
    declared by ``media_formats``. Media formats are tried in order.
    """

    file_extensions: tuple[str, ...] = Field(default=())
    fixed_width: int = Field(default=0, ge=0)
    fixed_height: int = Field(default=0, ge=0)
    media_formats: tuple[MediaFormat, ...] = Field(default=())
    include_asset_thumbnails: bool = False

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @field_validator("file_extensions")
    @classmethod
    def normalize_file_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _normalize_extensions(v)

    @property
    def has_fixed_size(self) -> bool:
        return self.fixed_width > 0 or self.fixed_height > 0

    def with_media_formats(self, *media_formats: MediaFormat) -> "MediaArgs":
        return self.model_copy(update={"media_formats": tuple(media_formats)})

    def with_file_extensions(self, *file_extensions: str) -> "MediaArgs":
        return self.model_copy(
            update={"file_extensions": _normalize_extensions(file_extensions)}
        )
