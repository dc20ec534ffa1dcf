"""
LAY file parser for reading .lay sprite layout files.
"""

import sys
from typing import BinaryIO, Dict, List, Optional, Tuple

import numpy as np

from .container import read_exact
from .constants import LayFormat, SpriteTag, OVERLAY_FLAGS
from .errors import LayFormatError
from .sprite import (
    Base,
    Sub,
    Dependent,
    Overlay,
    SpriteVariant,
    SpriteRecord,
    ChunkRecord,
    ParsedLayout,
)
from data import read_uint32, read_float32_array, hex_bytes, DEBUG


def classify_sprite(type_tag: int, aux_id: int) -> SpriteVariant:
    """Map the type byte of a sprite record to its variant."""
    if type_tag == SpriteTag.BASE:
        return Base()
    if type_tag == SpriteTag.SUB:
        return Sub()
    if type_tag in SpriteTag.DEPENDENT:
        return Dependent(exact_type=type_tag, depends_on=aux_id)
    if type_tag == SpriteTag.OVERLAY:
        return Overlay()
    raise LayFormatError(f"Unknown sprite type {hex_bytes(bytes([type_tag]))}")


def float_to_coordinate(value: float) -> int:
    """Convert an integral float field to int."""
    if not np.isfinite(value):
        raise LayFormatError(f"unsuitable float value {value}")
    if value != np.trunc(value):
        raise LayFormatError(f"float has fractional part {value}")
    return int(value)


class LayParser:
    """Parser for LAY sprite layout files.

    Reads from an already decoded stream, see container.open_lay_stream.
    A parser instance is meant for a single parse call.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.sprite_count = 0
        self.chunk_count = 0

    def parse(self) -> ParsedLayout:
        """Parse the whole layout, raising on the first invalid record."""
        self._read_header()
        sprites, sub_map = self._read_sprites()

        if not sprites:
            raise LayFormatError("no sprites")

        # Without a base at index 0 the subs depend on nothing
        base_dep: Optional[int] = 0 if isinstance(sprites[0].variant, Base) else None

        chunks, (min_x, min_y), (max_x, max_y) = self._read_chunks()

        sprite_w = max_x + abs(min_x) + LayFormat.SPRITE_SIZE_PAD
        sprite_h = max_y + abs(min_y) + LayFormat.SPRITE_SIZE_PAD

        if DEBUG:
            print(
                f"[DEBUG] Canvas {sprite_w}x{sprite_h}, "
                f"box ({min_x}, {min_y})..({max_x}, {max_y})",
                file=sys.stderr,
            )

        return ParsedLayout(
            sprites=sprites,
            sub_map=sub_map,
            chunks=chunks,
            base_dep=base_dep,
            sprite_w=sprite_w,
            sprite_h=sprite_h,
            sprite_xy_min=(min_x, min_y),
            sprite_xy_max=(max_x, max_y),
        )

    def _read_header(self) -> None:
        data = read_exact(self.stream, LayFormat.LENGTH_HEADER)
        self.sprite_count = read_uint32(data, 0)
        self.chunk_count = read_uint32(data, 4)

        if DEBUG:
            print(
                f"[DEBUG] Header: {self.sprite_count} sprites, "
                f"{self.chunk_count} chunks",
                file=sys.stderr,
            )

    def _read_sprites(self) -> Tuple[List[SpriteRecord], Dict[int, int]]:
        sprites: List[SpriteRecord] = []
        sub_map: Dict[int, int] = {}

        for index in range(self.sprite_count):
            data = read_exact(self.stream, LayFormat.LENGTH_SPRITE)
            sprite_id, aux_id, flags, type_tag = data[0], data[1], data[2], data[3]

            sprite = SpriteRecord(
                variant=classify_sprite(type_tag, aux_id),
                id=sprite_id,
                chunk_offset=read_uint32(data, 4),
                chunk_count=read_uint32(data, 8),
            )

            if isinstance(sprite.variant, Overlay):
                if aux_id != 0 or flags != OVERLAY_FLAGS:
                    print(
                        f"[WARNING] Ambiguous overlay head [1..3]: {hex_bytes(data[1:3])}",
                        file=sys.stderr,
                    )
            elif flags != 0:
                print(
                    f"[WARNING] Ambiguous sprite head [2]: {hex_bytes(data[2:3])}",
                    file=sys.stderr,
                )

            if isinstance(sprite.variant, Sub):
                sub_map[sprite.id] = len(sprites)

            if DEBUG:
                print(f"[DEBUG] Sprite[{index}]: {sprite}", file=sys.stderr)

            sprites.append(sprite)

        return sprites, sub_map

    def _read_chunks(
        self,
    ) -> Tuple[List[ChunkRecord], Tuple[int, int], Tuple[int, int]]:
        chunks: List[ChunkRecord] = []
        # The box starts at the origin, so it always contains (0, 0)
        min_x = min_y = max_x = max_y = 0

        for index in range(self.chunk_count):
            data = read_exact(self.stream, LayFormat.LENGTH_CHUNK)
            img_x, img_y, chunk_x, chunk_y = (
                float_to_coordinate(value)
                for value in read_float32_array(data, 0, LayFormat.CHUNK_FIELDS)
            )

            max_x = max(max_x, img_x)
            min_x = min(min_x, img_x)
            max_y = max(max_y, img_y)
            min_y = min(min_y, img_y)

            chunk = ChunkRecord(
                img_x=img_x, img_y=img_y, chunk_x=chunk_x, chunk_y=chunk_y
            )

            if DEBUG:
                print(f"[DEBUG] Chunk[{index}]: {chunk}", file=sys.stderr)

            chunks.append(chunk)

        return chunks, (min_x, min_y), (max_x, max_y)
