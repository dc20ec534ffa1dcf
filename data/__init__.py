"""
Core configuration, constants, and utils
"""

from .config import (
    DEBUG,
    CURRENT_VERSION,
)

from .utils import (
    read_uint32,
    read_float32_array,
    read_file_to_bytes,
    write_xml_file,
    write_json_file,
    int_value_to_string,
    hex_bytes,
)

from .constants import (
    SEPARATOR_LINE_LENGTH,
    WORD_SIZE,
)

__all__ = [
    # Config
    "DEBUG",
    "CURRENT_VERSION",
    # Utils
    "read_uint32",
    "read_float32_array",
    "read_file_to_bytes",
    "write_xml_file",
    "write_json_file",
    "int_value_to_string",
    "hex_bytes",
    # Constants
    "SEPARATOR_LINE_LENGTH",
    "WORD_SIZE",
]
