"""
LAY file I/O operations for parsing LAY sprite layout files.
"""

import io
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .container import open_lay_stream
from .lay_parser import LayParser
from .sprite import ParsedLayout
from data import read_file_to_bytes


def parse_lay(source: BinaryIO) -> ParsedLayout:
    """
    Parse a LAY layout from a binary stream.

    The stream may hold a raw or a zlib compressed layout. Seekable streams
    are peeked and rewound, forward-only streams are peeked and replayed.

    Raises:
        LayIOError: The stream ended early
        LayDecompressError: The compressed stream is corrupt or truncated
        LayFormatError: A record violates the layout
    """
    stream = open_lay_stream(source)
    return LayParser(stream).parse()


def extract_lay(
    lay_input: Union[str, Path, bytes, BinaryIO], output_dir: Optional[Path] = None
) -> ParsedLayout:
    """
    Extract a LAY layout from a file path, raw bytes or an open binary file.

    Args:
        lay_input: Path (or str path) to a .lay file, raw LAY bytes or a binary stream
        output_dir: Optional output directory. If provided, writes the layout XML and JSON summary.

    Returns:
        ParsedLayout object
    """
    if isinstance(lay_input, (bytes, bytearray)):
        layout = parse_lay(io.BytesIO(lay_input))
    elif isinstance(lay_input, (str, Path)):
        layout = parse_lay(io.BytesIO(read_file_to_bytes(Path(lay_input))))
    else:
        layout = parse_lay(lay_input)

    if output_dir is not None:
        from external_files import write_external_files

        write_external_files(layout, output_dir)

    return layout
