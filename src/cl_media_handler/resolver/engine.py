"""Rendition resolution: pick the stored or virtual rendition best matching MediaArgs."""

import math
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from loguru import logger

from ..common.asset_source import AssetSource
from ..common.rendition import AnyRendition, VirtualRenditionMetadata
from ..common.schemas import MediaArgs, MediaFormat
from ..utils.media_types import RATIO_TOLERANCE, is_image_extension
from .candidates import CandidateCache, Candidates, build_candidates, sort_candidates

T = TypeVar("T")


def first_match(
    media_formats: Iterable[MediaFormat],
    visit: Callable[[MediaFormat], T | None],
) -> T | None:
    """Apply ``visit`` to each media format in order; return the first non-None result."""
    for media_format in media_formats:
        result = visit(media_format)
        if result is not None:
            return result
    return None


def requested_file_extensions(media_args: MediaArgs) -> frozenset[str] | None:
    """Merge file extensions from media args and media formats.

    Returns:
        The effective set of extensions. An empty set allows any extension.
        None if both sides restrict extensions and share none, in which case
        no rendition can satisfy the request.
    """
    args_extensions = frozenset(media_args.file_extensions)
    format_extensions = frozenset(
        ext for media_format in media_args.media_formats for ext in media_format.extensions
    )

    if args_extensions and format_extensions:
        intersection = args_extensions & format_extensions
        if not intersection:
            return None
        return intersection
    elif args_extensions:
        return args_extensions
    else:
        return format_extensions


def filter_by_extensions(candidates: Candidates, extensions: frozenset[str]) -> Candidates:
    if not extensions:
        return candidates
    return tuple(c for c in candidates if c.file_extension in extensions)


def is_size_matching_request(media_args: MediaArgs, extensions: Iterable[str]) -> bool:
    """True if the request carries size or ratio constraints for an image."""
    any_image_extension = any(is_image_extension(ext) for ext in extensions)
    if not any_image_extension and not media_args.has_fixed_size:
        return False

    if media_args.has_fixed_size:
        return True
    return any(media_format.is_size_constrained for media_format in media_args.media_formats)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def derive_virtual_rendition(
    rendition: AnyRendition,
    width: int,
    height: int,
    ratio: float,
) -> VirtualRenditionMetadata | None:
    """Build a virtual rendition scaled down from ``rendition``.

    A missing ratio is taken from the rendition itself; a missing width or
    height is computed from the other one and the ratio (width / height).
    Returns None if no positive target size can be derived.
    """
    if ratio < RATIO_TOLERANCE:
        ratio = rendition.ratio

    if ratio > 0:
        if height == 0 and width > 0:
            height = _round_half_up(width / ratio)
        if width == 0 and height > 0:
            width = _round_half_up(height * ratio)

    if width <= 0 or height <= 0:
        return None

    if isinstance(rendition, VirtualRenditionMetadata):
        return VirtualRenditionMetadata(
            name=rendition.name,
            width=width,
            height=height,
            handle=rendition.handle,
            source_width=rendition.source_width,
            source_height=rendition.source_height,
            crop=rendition.crop,
        )
    return VirtualRenditionMetadata(
        name=rendition.name,
        width=width,
        height=height,
        handle=rendition.handle,
        source_width=rendition.width,
        source_height=rendition.height,
    )


def find_virtual_rendition(
    candidates: Sequence[AnyRendition],
    width: int,
    height: int,
    ratio: float,
) -> VirtualRenditionMetadata | None:
    """Scale down from the smallest candidate that is at least width x height.

    With a ratio, the candidate must also have that ratio. Only the first
    qualifying candidate is considered.
    """
    for candidate in candidates:
        if candidate.matches_bounds(width, height, 0, 0, ratio):
            return derive_virtual_rendition(candidate, width, height, ratio)
    return None


class RenditionHandler:
    """Resolves renditions of assets against MediaArgs.

    Candidate sets are cached per asset and thumbnail flag, so the same
    handler can resolve many requests against the same asset cheaply.
    Resolution never raises for "no match"; it returns None.
    """

    def __init__(self, cache: CandidateCache | None = None):
        self._cache: CandidateCache = cache if cache is not None else CandidateCache()

    @property
    def cache(self) -> CandidateCache:
        return self._cache

    def post_process_candidates(
        self,
        source: AssetSource,
        candidates: Candidates,
    ) -> Sequence[AnyRendition]:
        """Hook to add or replace candidates (e.g. virtual crop renditions)."""
        return candidates

    def get_available_renditions(self, source: AssetSource, media_args: MediaArgs) -> Candidates:
        return self._cache.get(
            source,
            media_args.include_asset_thumbnails,
            self._build_candidates,
        )

    def _build_candidates(self, source: AssetSource, include_thumbnails: bool) -> Candidates:
        candidates = build_candidates(source, include_thumbnails)
        return sort_candidates(self.post_process_candidates(source, candidates))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, source: AssetSource, media_args: MediaArgs) -> AnyRendition | None:
        """Return the best matching rendition for ``media_args``, or None."""
        extensions = requested_file_extensions(media_args)
        if extensions is None:
            logger.debug(
                f"Asset '{source.asset_id}': requested extensions "
                f"{sorted(media_args.file_extensions)} do not intersect media format extensions"
            )
            return None

        candidates = filter_by_extensions(
            self.get_available_renditions(source, media_args), extensions
        )

        if not is_size_matching_request(media_args, extensions):
            return self._original_or_first(source, candidates)

        exact = self._exact_match(source, candidates, media_args)
        if exact is not None:
            logger.debug(f"Asset '{source.asset_id}': exact match '{exact.name}'")
            return exact

        virtual = self._virtual_match(candidates, media_args)
        if virtual is not None:
            logger.debug(
                f"Asset '{source.asset_id}': virtual {virtual.width}x{virtual.height} "
                f"from '{virtual.name}'"
            )
            return virtual

        logger.debug(f"Asset '{source.asset_id}': no rendition matches")
        return None

    def _original_or_first(self, source: AssetSource, candidates: Candidates) -> AnyRendition | None:
        original = source.original
        if original is not None:
            for candidate in candidates:
                if candidate.kind == "rendition" and candidate.name == original.name:
                    return candidate
        if candidates:
            return candidates[0]
        return None

    def _exact_match(
        self,
        source: AssetSource,
        candidates: Candidates,
        media_args: MediaArgs,
    ) -> AnyRendition | None:
        if media_args.has_fixed_size:
            for candidate in candidates:
                if candidate.matches_size(media_args.fixed_width, media_args.fixed_height):
                    return candidate
            return None

        if media_args.media_formats:

            def visit(media_format: MediaFormat) -> AnyRendition | None:
                for candidate in candidates:
                    if candidate.matches_bounds(
                        media_format.effective_min_width,
                        media_format.effective_min_height,
                        media_format.effective_max_width,
                        media_format.effective_max_height,
                        media_format.effective_ratio,
                    ):
                        return candidate.with_media_format(media_format)
                return None

            return first_match(media_args.media_formats, visit)

        return self._original_or_first(source, candidates)

    def _virtual_match(
        self,
        candidates: Candidates,
        media_args: MediaArgs,
    ) -> VirtualRenditionMetadata | None:
        if media_args.has_fixed_size:
            width = media_args.fixed_width
            height = media_args.fixed_height
            ratio = width / height if width > 0 and height > 0 else 0.0
            return find_virtual_rendition(candidates, width, height, ratio)

        def visit(media_format: MediaFormat) -> VirtualRenditionMetadata | None:
            rendition = find_virtual_rendition(
                candidates,
                media_format.effective_min_width,
                media_format.effective_min_height,
                media_format.effective_ratio,
            )
            if rendition is None:
                return None
            return rendition.with_media_format(media_format)

        return first_match(media_args.media_formats, visit)
