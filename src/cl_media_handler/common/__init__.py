"""Common module - protocols, schemas and rendition metadata."""

from .asset_source import AssetSource, RenditionSource
from .rendition import AnyRendition, RenditionMetadata, VirtualRenditionMetadata
from .schemas import CropDimension, MediaArgs, MediaFormat

__all__ = [
    "AssetSource",
    "RenditionSource",
    "AnyRendition",
    "RenditionMetadata",
    "VirtualRenditionMetadata",
    "CropDimension",
    "MediaArgs",
    "MediaFormat",
]
