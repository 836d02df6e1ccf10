"""cl_media_handler - Resolve media renditions against size, ratio and file type constraints."""

from .asset import Asset
from .common.asset_source import AssetSource, RenditionSource
from .common.rendition import AnyRendition, RenditionMetadata, VirtualRenditionMetadata
from .common.schemas import CropDimension, MediaArgs, MediaFormat
from .errors import (
    AssetStoreError,
    DuplicateMediaFormatError,
    MediaHandlerError,
    UnknownMediaFormatError,
)
from .formats import MediaFormatCatalog
from .resolver.candidates import CandidateCache
from .resolver.engine import RenditionHandler
from .utils.media_types import RATIO_TOLERANCE, MediaType

__version__ = "0.1.0"

__all__ = [
    "Asset",
    "AssetSource",
    "RenditionSource",
    "AnyRendition",
    "RenditionMetadata",
    "VirtualRenditionMetadata",
    "CropDimension",
    "MediaArgs",
    "MediaFormat",
    "MediaFormatCatalog",
    "CandidateCache",
    "RenditionHandler",
    "MediaType",
    "RATIO_TOLERANCE",
    "AssetStoreError",
    "DuplicateMediaFormatError",
    "MediaHandlerError",
    "UnknownMediaFormatError",
    "__version__",
]
