"""AssetSource Protocol - interface to the content store holding renditions."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class RenditionSource(Protocol):
    """One stored rendition as exposed by the content store.

    ``width``/``height`` may be None for renditions without image metadata;
    they are then treated as non-image renditions.
    """

    @property
    def name(self) -> str: ...

    @property
    def width(self) -> int | None: ...

    @property
    def height(self) -> int | None: ...

    @property
    def handle(self) -> object:
        """Opaque reference to the backing byte source."""
        ...


@runtime_checkable
class AssetSource(Protocol):
    """Protocol for assets whose renditions can be resolved.

    Applications implement this on top of their content store. The returned
    values are read once per cache population and must not change for the
    lifetime of ``asset_id``.

    Implementations may also expose ``title``, ``alt_text``, ``description``,
    ``path`` (str or None) and ``properties`` (a mapping). They are not part
    of the protocol check; Asset reads them when present.
    """

    @property
    def asset_id(self) -> str:
        """Stable identifier used as the candidate cache key."""
        ...

    @property
    def renditions(self) -> Sequence[RenditionSource]: ...

    @property
    def original(self) -> RenditionSource | None:
        """The original rendition, if the store designates one."""
        ...
