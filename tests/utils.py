"""Common utility functions for test scripts."""

import io
import struct
import traceback
from contextlib import redirect_stderr

from data import SEPARATOR_LINE_LENGTH

SECTION_SEPARATOR = "=" * SEPARATOR_LINE_LENGTH


def pack_header(sprite_count: int, chunk_count: int) -> bytes:
    return struct.pack("<II", sprite_count, chunk_count)


def pack_sprite(
    sprite_id: int,
    type_tag: int,
    aux_id: int = 0,
    flags: int = 0,
    chunk_offset: int = 0,
    chunk_count: int = 0,
) -> bytes:
    return struct.pack(
        "<BBBBII", sprite_id, aux_id, flags, type_tag, chunk_offset, chunk_count
    )


def pack_chunk(img_x, img_y, chunk_x=0.0, chunk_y=0.0) -> bytes:
    return struct.pack("<4f", img_x, img_y, chunk_x, chunk_y)


def build_lay(sprites, chunks, sprite_count=None, chunk_count=None) -> bytes:
    """Build raw LAY bytes. Counts default to the number of records given."""
    if sprite_count is None:
        sprite_count = len(sprites)
    if chunk_count is None:
        chunk_count = len(chunks)
    return pack_header(sprite_count, chunk_count) + b"".join(sprites) + b"".join(chunks)


class ForwardOnlyReader(io.RawIOBase):
    """Non-seekable stream, like a pipe."""

    def __init__(self, data: bytes):
        self._data = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def readinto(self, b) -> int:
        chunk = self._data.read(len(b))
        b[: len(chunk)] = chunk
        return len(chunk)


def capture_stderr(func, *args, **kwargs):
    """Run func and return (result, text written to stderr)."""
    buf = io.StringIO()
    with redirect_stderr(buf):
        result = func(*args, **kwargs)
    return result, buf.getvalue()


def expect_error(func, exc_type, message=None):
    """Call func, check it raises exc_type (with message in its text)."""
    buf = io.StringIO()
    try:
        with redirect_stderr(buf):
            func()
    except exc_type as e:
        if message is not None:
            assert message in str(e), f"'{message}' not in '{e}'"
        return e
    raise AssertionError(f"{exc_type.__name__} not raised")


def run_tests(namespace: dict) -> int:
    """Run every test_* function of a module, print a summary, return exit code."""
    tests = [
        (name, func)
        for name, func in namespace.items()
        if name.startswith("test_") and callable(func)
    ]
    results = {}

    for name, func in tests:
        try:
            func()
            results[name] = True
        except Exception:
            traceback.print_exc()
            results[name] = False
        print(f"{'PASS' if results[name] else 'FAIL'} - {name}")

    passed = sum(1 for r in results.values() if r)
    total = len(results)
    print(f"\n{SECTION_SEPARATOR}")
    print(f"Passed: {passed}/{total}")
    if passed < total:
        print(f"Failed: {total - passed}/{total}")
    print(SECTION_SEPARATOR)

    return 0 if passed == total else 1
