"""
Wrapper functions for writing all external files (layout XML and JSON summary).
"""

from pathlib import Path
from typing import Any, Dict

from lay_files.sprite import ParsedLayout
from data import write_json_file, CURRENT_VERSION
from .constants import ExternalFiles
from .xml_writer import write_layout_xml, variant_name


def layout_summary(layout: ParsedLayout) -> Dict[str, Any]:
    """Build the layoutinfo.json content for a layout."""
    return {
        "version": CURRENT_VERSION,
        "sprite_count": len(layout.sprites),
        "chunk_count": len(layout.chunks),
        "variants": [variant_name(sprite) for sprite in layout.sprites],
        "base_dep": layout.base_dep,
        "sub_map": {str(k): v for k, v in sorted(layout.sub_map.items())},
        "width": layout.sprite_w,
        "height": layout.sprite_h,
        "min": list(layout.sprite_xy_min),
        "max": list(layout.sprite_xy_max),
    }


def write_external_files(layout: ParsedLayout, output_dir: Path) -> None:
    """Write all external files for a parsed layout.

    Args:
        layout: ParsedLayout object to export
        output_dir: Output directory path
    """

    output_dir.mkdir(parents=True, exist_ok=True)

    write_layout_xml(layout, output_dir / ExternalFiles.LAYOUT_FILE)

    write_json_file(output_dir / ExternalFiles.LAYOUTINFO_FILE, layout_summary(layout))
