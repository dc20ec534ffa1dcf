"""
Exceptions raised while decoding LAY files.
"""


class LayError(Exception):
    """Base class for every LAY decoding failure."""


class LayIOError(LayError, OSError):
    """The stream ended before a complete record could be read."""


class LayDecompressError(LayError, ValueError):
    """The zlib container is malformed or truncated."""


class LayFormatError(LayError, ValueError):
    """The decoded bytes violate the LAY layout."""
