"""In-memory content store adapters."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

ORIGINAL_RENDITION_NAME = "original"


@dataclass(frozen=True)
class InMemoryRendition:
    name: str
    width: int | None = None
    height: int | None = None
    handle: object = None

    @property
    def stem(self) -> str:
        return self.name.rpartition(".")[0] or self.name


@dataclass(frozen=True, eq=False)
class InMemoryAsset:
    """Asset backed by a fixed list of renditions.

    If ``original_name`` is given, the rendition with exactly that name is the
    original. Otherwise the first rendition whose name without extension is
    "original" (``original``, ``original.jpg``, ...) is.
    """

    asset_id: str
    renditions: Sequence[InMemoryRendition] = field(default_factory=tuple)
    original_name: str | None = None
    title: str | None = None
    alt_text: str | None = None
    description: str | None = None
    path: str | None = None
    properties: Mapping[str, object] = field(default_factory=dict)

    @property
    def original(self) -> InMemoryRendition | None:
        for rendition in self.renditions:
            if self.original_name is not None:
                if rendition.name == self.original_name:
                    return rendition
            elif rendition.stem == ORIGINAL_RENDITION_NAME:
                return rendition
        return None
