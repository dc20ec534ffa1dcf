"""
Container detection and stream decoding for LAY files.

A LAY file is stored either raw or as one zlib stream. There is no magic
number: the first little-endian u32 of a raw file is its sprite count, so an
implausibly large leading value means the bytes are zlib data instead.
"""

import io
import sys
import zlib
from typing import BinaryIO, Tuple

from data import read_uint32, WORD_SIZE
from .constants import LayFormat
from .errors import LayDecompressError, LayIOError

INFLATE_CHUNK_SIZE = 8192


class ContainerKind:
    RAW = "raw"
    COMPRESSED = "compressed"


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly size bytes, raising LayIOError on a short stream."""
    buf = bytearray()
    while len(buf) < size:
        data = stream.read(size - len(buf))
        if not data:
            raise LayIOError(
                f"Unexpected end of stream: expected {size} bytes, got {len(buf)}"
            )
        buf.extend(data)
    return bytes(buf)


class PrefixedReader(io.RawIOBase):
    """Forward-only reader serving already consumed bytes before the source."""

    def __init__(self, prefix: bytes, source: BinaryIO):
        self._prefix = prefix
        self._source = source

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        if self._prefix:
            n = min(len(b), len(self._prefix))
            b[:n] = self._prefix[:n]
            self._prefix = self._prefix[n:]
            return n
        data = self._source.read(len(b))
        if not data:
            return 0
        n = len(data)
        b[:n] = data
        return n


class ZlibReader(io.RawIOBase):
    """Inflates a zlib stream read from source on demand."""

    def __init__(self, source: BinaryIO, chunk_size: int = INFLATE_CHUNK_SIZE):
        self._source = source
        self._chunk_size = chunk_size
        self._inflater = zlib.decompressobj()
        self._buffer = b""

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        while not self._buffer:
            if self._inflater.unconsumed_tail:
                compressed = self._inflater.unconsumed_tail
            elif self._inflater.eof:
                return 0
            else:
                compressed = self._source.read(self._chunk_size)
                if not compressed:
                    raise LayDecompressError("Truncated compressed stream")
            try:
                self._buffer = self._inflater.decompress(compressed, self._chunk_size)
            except zlib.error as e:
                raise LayDecompressError(f"Corrupt compressed stream: {e}") from e

        n = min(len(b), len(self._buffer))
        b[:n] = self._buffer[:n]
        self._buffer = self._buffer[n:]
        return n


def detect_container(source: BinaryIO) -> Tuple[str, BinaryIO]:
    """Classify source as raw or compressed from its leading u32.

    Seekable sources are rewound to where they were. Forward-only sources
    cannot be rewound, so the peeked bytes are put back in front of them.

    Returns:
        Tuple of (ContainerKind value, stream positioned at the original start)
    """
    if source.seekable():
        start = source.tell()
        head = read_exact(source, WORD_SIZE)
        source.seek(start)
        stream = source
    else:
        head = read_exact(source, WORD_SIZE)
        stream = PrefixedReader(head, source)

    if read_uint32(head, 0) > LayFormat.SPRITES_MAX_RAW:
        print("[INFO] Compressed lay", file=sys.stderr)
        return ContainerKind.COMPRESSED, stream

    print("[INFO] Raw lay", file=sys.stderr)
    return ContainerKind.RAW, stream


def open_lay_stream(source: BinaryIO) -> BinaryIO:
    """Return a readable stream of the decoded LAY bytes."""
    kind, stream = detect_container(source)
    if kind == ContainerKind.COMPRESSED:
        return ZlibReader(stream)
    return stream
