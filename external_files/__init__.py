"""
External files utility module for writing parsed layout XML and JSON files.
"""

from .files_io import (
    layout_summary,
    write_external_files,
)
from .xml_writer import write_layout_xml

__all__ = [
    "layout_summary",
    "write_external_files",
    "write_layout_xml",
]
