import json
import struct
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict

import numpy as np


def read_uint32(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<I" if little_endian else ">I"
    return struct.unpack_from(fmt, data, offset)[0]


def read_float32_array(
    data: bytes, offset: int, count: int, little_endian: bool = True
) -> np.ndarray:
    dtype = np.dtype("<f4" if little_endian else ">f4")
    return np.frombuffer(data, dtype=dtype, count=count, offset=offset)


def read_file_to_bytes(filepath: Path) -> bytes:
    with open(filepath, "rb") as f:
        return f.read()


def write_xml_file(root: ET.Element, output_path: Path) -> None:
    tree = ET.ElementTree(root)
    ET.indent(tree, space="    ")
    tree.write(output_path, encoding="utf-8", xml_declaration=True)


def write_json_file(filepath: Path, data: Dict[str, Any], indent: int = 4) -> None:
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def int_value_to_string(value: int) -> str:
    return str(value)


def hex_bytes(data: bytes) -> str:
    """Format bytes as one hex literal, e.g. b"\\x00\\x10" -> "0x0010"."""
    return "0x" + data.hex().upper()
