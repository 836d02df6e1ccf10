"""Content store adapters implementing AssetSource."""

from .local import LocalDirectoryAsset, LocalRendition
from .memory import InMemoryAsset, InMemoryRendition

__all__ = ["InMemoryAsset", "InMemoryRendition", "LocalDirectoryAsset", "LocalRendition"]
