from enum import StrEnum
from typing import Final

# Ratios closer than this are treated as equal.
RATIO_TOLERANCE: Final[float] = 0.01

# Renditions named "<prefix>.<anything>" are generated asset thumbnails.
THUMBNAIL_PREFIX: Final[str] = "cq5dam.thumbnail"

IMAGE_FILE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {"gif", "jpg", "jpeg", "png", "tif", "tiff", "webp"}
)
VIDEO_FILE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {"mp4", "mov", "avi", "mkv", "webm"}
)
AUDIO_FILE_EXTENSIONS: Final[frozenset[str]] = frozenset({"mp3", "wav", "ogg", "aac"})
TEXT_FILE_EXTENSIONS: Final[frozenset[str]] = frozenset({"txt", "html", "css", "csv"})


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_extension(cls, extension: str) -> "MediaType":
        ext = normalize_extension(extension)
        if ext in IMAGE_FILE_EXTENSIONS:
            return MediaType.IMAGE
        elif ext in VIDEO_FILE_EXTENSIONS:
            return MediaType.VIDEO
        elif ext in AUDIO_FILE_EXTENSIONS:
            return MediaType.AUDIO
        elif ext in TEXT_FILE_EXTENSIONS:
            return MediaType.TEXT
        else:
            return MediaType.FILE


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and strip whitespace and a leading dot."""
    return extension.strip().lstrip(".").lower()


def file_extension(file_name: str) -> str:
    """Return the lower-cased extension of a file name, or "" if it has none."""
    _, dot, ext = file_name.rpartition(".")
    if not dot:
        return ""
    return ext.lower()


def is_image_extension(extension: str) -> bool:
    return normalize_extension(extension) in IMAGE_FILE_EXTENSIONS


def is_asset_thumbnail(file_name: str) -> bool:
    return file_name.startswith(THUMBNAIL_PREFIX + ".")


def ratio_matches(ratio: float, other: float) -> bool:
    return abs(ratio - other) < RATIO_TOLERANCE
