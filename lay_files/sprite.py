"""
Data structures for representing a parsed LAY sprite layout.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Base:
    """Primary layer."""


@dataclass(frozen=True)
class Sub:
    """Secondary layer, implicitly drawn over the base."""


@dataclass(frozen=True)
class Dependent:
    """Layer depending on the sub sprite whose id is ``depends_on``."""

    exact_type: int
    depends_on: int


@dataclass(frozen=True)
class Overlay:
    """Non-opaque layer composited last."""


SpriteVariant = Union[Base, Sub, Dependent, Overlay]


@dataclass(frozen=True)
class SpriteRecord:
    """chunk_offset/chunk_count index into ParsedLayout.chunks, unchecked."""

    variant: SpriteVariant
    id: int
    chunk_offset: int
    chunk_count: int


@dataclass(frozen=True)
class ChunkRecord:
    """Placement of one source tile.

    img_x/img_y locate the tile in the composed image, chunk_x/chunk_y
    locate it in the source image.
    """

    img_x: int
    img_y: int
    chunk_x: int
    chunk_y: int


@dataclass(frozen=True)
class ParsedLayout:
    """Result of a single LAY parse.

    Sprites keep their on-disk order. sub_map maps a sub sprite id to its
    index in sprites, a repeated id keeps the last index. sprite_xy_min and
    sprite_xy_max are the raw bounding box of the chunk placements, which
    always contains the origin.
    """

    sprites: Tuple[SpriteRecord, ...]
    sub_map: Mapping[int, int]
    chunks: Tuple[ChunkRecord, ...]
    base_dep: Optional[int]
    sprite_w: int
    sprite_h: int
    sprite_xy_min: Tuple[int, int]
    sprite_xy_max: Tuple[int, int]

    # sub_map is not hashable
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "sprites", tuple(self.sprites))
        object.__setattr__(self, "chunks", tuple(self.chunks))
        object.__setattr__(self, "sub_map", MappingProxyType(dict(self.sub_map)))

    def __getstate__(self):
        state = dict(self.__dict__)
        state["sub_map"] = dict(self.sub_map)
        return state

    def __setstate__(self, state):
        for name, value in state.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "sub_map", MappingProxyType(dict(self.sub_map)))

    @property
    def base_sprite(self) -> Optional[SpriteRecord]:
        if self.base_dep is None:
            return None
        return self.sprites[self.base_dep]

    def sub_sprite(self, sprite_id: int) -> Optional[SpriteRecord]:
        """Look up the sub sprite a dependent sprite points at."""
        index = self.sub_map.get(sprite_id)
        if index is None:
            return None
        return self.sprites[index]
