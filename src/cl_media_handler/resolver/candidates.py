"""Candidate rendition sets and their per-asset cache."""

import threading
from collections import OrderedDict
from collections.abc import Callable, Sequence

from loguru import logger

from ..common.asset_source import AssetSource
from ..common.rendition import AnyRendition, RenditionMetadata
from ..utils.media_types import is_asset_thumbnail

Candidates = tuple[AnyRendition, ...]
CandidateFactory = Callable[[AssetSource, bool], Candidates]

DEFAULT_CACHE_SIZE = 1024


def sort_candidates(renditions: Sequence[AnyRendition]) -> Candidates:
    """Sort by ascending area then name; later duplicates (same kind and name) are dropped."""
    unique: dict[tuple[str, str], AnyRendition] = {}
    for rendition in renditions:
        unique.setdefault((rendition.kind, rendition.name), rendition)
    return tuple(sorted(unique.values(), key=lambda r: r.sort_key))


def build_candidates(source: AssetSource, include_thumbnails: bool) -> Candidates:
    """Materialize the sorted candidate set of an asset.

    Asset thumbnails are skipped unless ``include_thumbnails`` is set.
    """
    renditions: list[AnyRendition] = []
    for rendition in source.renditions:
        if not include_thumbnails and is_asset_thumbnail(rendition.name):
            continue
        renditions.append(RenditionMetadata.from_source(rendition))
    return sort_candidates(renditions)


class CandidateCache:
    """Candidate sets keyed by ``(asset_id, include_thumbnails)``.

    Each key is populated at most once while it stays cached. Building a set
    is deterministic, so the lock only prevents duplicate work. At most
    ``maxsize`` sets are kept (least recently used evicted first); ``None``
    means unbounded.
    """

    def __init__(self, maxsize: int | None = DEFAULT_CACHE_SIZE) -> None:
        if maxsize is not None and maxsize <= 0:
            raise ValueError("maxsize must be positive or None")
        self._maxsize: int | None = maxsize
        self._entries: OrderedDict[tuple[str, bool], Candidates] = OrderedDict()
        self._lock: threading.Lock = threading.Lock()

    @property
    def maxsize(self) -> int | None:
        return self._maxsize

    def get(
        self,
        source: AssetSource,
        include_thumbnails: bool,
        factory: CandidateFactory = build_candidates,
    ) -> Candidates:
        key = (source.asset_id, include_thumbnails)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                return cached

            cached = factory(source, include_thumbnails)
            self._entries[key] = cached
            logger.debug(
                f"Cached {len(cached)} candidate renditions for asset "
                f"'{source.asset_id}' (include_thumbnails={include_thumbnails})"
            )
            if self._maxsize is not None and len(self._entries) > self._maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted candidate renditions for asset '{evicted[0]}'")
        return cached

    def invalidate(self, asset_id: str | None = None) -> None:
        """Drop cached sets for one asset, or all of them if asset_id is None."""
        with self._lock:
            if asset_id is None:
                self._entries.clear()
                return
            for key in [k for k in self._entries if k[0] == asset_id]:
                del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
