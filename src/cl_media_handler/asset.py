"""Asset - resolves renditions of one content store asset."""

from collections.abc import Mapping

from .common.asset_source import AssetSource
from .common.rendition import AnyRendition
from .common.schemas import MediaArgs
from .resolver.engine import RenditionHandler
from .utils.media_types import IMAGE_FILE_EXTENSIONS, is_image_extension


class Asset:
    """Media item whose renditions are resolved on demand.

    Several Asset instances may share one RenditionHandler (and therefore
    its candidate cache).

    Example:
        handler = RenditionHandler()
        asset = Asset(LocalDirectoryAsset("/media/42"), handler)

        teaser = MediaFormat(name="teaser", width=400, height=300, extensions=("jpg",))
        rendition = asset.get_rendition(MediaArgs(media_formats=(teaser,)))
    """

    def __init__(self, source: AssetSource, handler: RenditionHandler | None = None):
        self._source: AssetSource = source
        self._handler: RenditionHandler = handler if handler is not None else RenditionHandler()

    @property
    def asset_id(self) -> str:
        return self._source.asset_id

    @property
    def source(self) -> AssetSource:
        return self._source

    # Descriptive metadata; None (or empty) when the store does not provide it.
    @property
    def title(self) -> str | None:
        return getattr(self._source, "title", None)

    @property
    def alt_text(self) -> str | None:
        return getattr(self._source, "alt_text", None)

    @property
    def description(self) -> str | None:
        return getattr(self._source, "description", None)

    @property
    def path(self) -> str | None:
        return getattr(self._source, "path", None)

    @property
    def properties(self) -> Mapping[str, object]:
        properties = getattr(self._source, "properties", None)
        return properties if properties is not None else {}

    def get_default_rendition(self) -> AnyRendition | None:
        """Original rendition, or the smallest one if there is no original."""
        return self.get_rendition(MediaArgs())

    def get_rendition(self, media_args: MediaArgs) -> AnyRendition | None:
        return self._handler.resolve(self._source, media_args)

    def get_image_rendition(self, media_args: MediaArgs) -> AnyRendition | None:
        """Like get_rendition, but only returns image renditions.

        If neither the media args nor their media formats restrict file
        extensions, the request is limited to image extensions.
        """
        restricted = media_args.file_extensions or any(
            media_format.extensions for media_format in media_args.media_formats
        )
        if not restricted:
            media_args = media_args.with_file_extensions(*sorted(IMAGE_FILE_EXTENSIONS))

        rendition = self.get_rendition(media_args)
        if rendition is None or not is_image_extension(rendition.file_extension):
            return None
        return rendition

    def get_download_rendition(self, media_args: MediaArgs) -> AnyRendition | None:
        """Like get_rendition, but never returns a virtual rendition."""
        rendition = self.get_rendition(media_args)
        if rendition is None or rendition.kind == "virtual":
            return None
        return rendition
