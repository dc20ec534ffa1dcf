"""
LAY files module for decoding LAY sprite layout files.
"""

from .lay_io import extract_lay, parse_lay
from .lay_parser import LayParser, classify_sprite, float_to_coordinate
from .container import (
    ContainerKind,
    detect_container,
    open_lay_stream,
    read_exact,
    PrefixedReader,
    ZlibReader,
)
from .sprite import (
    # Sprite classes
    Base,
    Sub,
    Dependent,
    Overlay,
    SpriteVariant,
    SpriteRecord,
    ChunkRecord,
    ParsedLayout,
)
from .errors import (
    LayError,
    LayIOError,
    LayDecompressError,
    LayFormatError,
)
from .constants import (
    LayFormat,
    SpriteTag,
    OVERLAY_FLAGS,
)

__all__ = [
    # IO functions
    "extract_lay",
    "parse_lay",
    # Parsing
    "LayParser",
    "classify_sprite",
    "float_to_coordinate",
    # Container
    "ContainerKind",
    "detect_container",
    "open_lay_stream",
    "read_exact",
    "PrefixedReader",
    "ZlibReader",
    # Sprite classes
    "Base",
    "Sub",
    "Dependent",
    "Overlay",
    "SpriteVariant",
    "SpriteRecord",
    "ChunkRecord",
    "ParsedLayout",
    # Errors
    "LayError",
    "LayIOError",
    "LayDecompressError",
    "LayFormatError",
    # Constants
    "LayFormat",
    "SpriteTag",
    "OVERLAY_FLAGS",
]
