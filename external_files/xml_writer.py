"""
XML writer for parsed layout data structures.
Handles writing layout.xml
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from lay_files.sprite import (
    Dependent,
    ParsedLayout,
    SpriteRecord,
    ChunkRecord,
)
from .constants import XmlRoot, XmlNode, XmlProp, VARIANT_NAMES
from data import (
    int_value_to_string,
    write_xml_file,
)


def variant_name(sprite: SpriteRecord) -> str:
    return VARIANT_NAMES[type(sprite.variant).__name__]


def write_layout_xml(layout: ParsedLayout, output_path: Path) -> None:
    """Write layout.xml with sprites, sub map, chunks and canvas."""
    root = ET.Element(XmlRoot.LAYOUT)

    sprites_elem = ET.SubElement(root, XmlNode.SPRITES)
    for sprite in layout.sprites:
        write_sprite_node(sprites_elem, sprite)

    submap_elem = ET.SubElement(root, XmlNode.SUBMAP)
    for sprite_id, index in sorted(layout.sub_map.items()):
        entry = ET.SubElement(submap_elem, XmlNode.SUBENTRY)
        ET.SubElement(entry, XmlProp.ID).text = int_value_to_string(sprite_id)
        ET.SubElement(entry, XmlProp.INDEX).text = int_value_to_string(index)

    chunks_elem = ET.SubElement(root, XmlNode.CHUNKS)
    for chunk in layout.chunks:
        write_chunk_node(chunks_elem, chunk)

    write_canvas_node(root, layout)

    write_xml_file(root, output_path)


def write_sprite_node(parent: ET.Element, sprite: SpriteRecord) -> None:
    elem = ET.SubElement(parent, XmlNode.SPRITE)
    ET.SubElement(elem, XmlProp.VARIANT).text = variant_name(sprite)
    ET.SubElement(elem, XmlProp.ID).text = int_value_to_string(sprite.id)

    if isinstance(sprite.variant, Dependent):
        ET.SubElement(elem, XmlProp.EXACTTYPE).text = f"0x{sprite.variant.exact_type:02X}"
        ET.SubElement(elem, XmlProp.DEPENDSON).text = int_value_to_string(
            sprite.variant.depends_on
        )

    ET.SubElement(elem, XmlProp.CHUNKOFFSET).text = int_value_to_string(
        sprite.chunk_offset
    )
    ET.SubElement(elem, XmlProp.CHUNKCOUNT).text = int_value_to_string(
        sprite.chunk_count
    )


def write_chunk_node(parent: ET.Element, chunk: ChunkRecord) -> None:
    elem = ET.SubElement(parent, XmlNode.CHUNK)
    ET.SubElement(elem, XmlProp.IMG_X).text = int_value_to_string(chunk.img_x)
    ET.SubElement(elem, XmlProp.IMG_Y).text = int_value_to_string(chunk.img_y)
    ET.SubElement(elem, XmlProp.CHUNK_X).text = int_value_to_string(chunk.chunk_x)
    ET.SubElement(elem, XmlProp.CHUNK_Y).text = int_value_to_string(chunk.chunk_y)


def write_canvas_node(parent: ET.Element, layout: ParsedLayout) -> None:
    canvas = ET.SubElement(parent, XmlNode.CANVAS)
    ET.SubElement(canvas, XmlProp.WIDTH).text = int_value_to_string(layout.sprite_w)
    ET.SubElement(canvas, XmlProp.HEIGHT).text = int_value_to_string(layout.sprite_h)
    if layout.base_dep is not None:
        ET.SubElement(canvas, XmlProp.BASEDEP).text = int_value_to_string(
            layout.base_dep
        )

    bounds = ET.SubElement(canvas, XmlNode.BOUNDS)
    min_x, min_y = layout.sprite_xy_min
    max_x, max_y = layout.sprite_xy_max
    ET.SubElement(bounds, XmlProp.MIN_X).text = int_value_to_string(min_x)
    ET.SubElement(bounds, XmlProp.MIN_Y).text = int_value_to_string(min_y)
    ET.SubElement(bounds, XmlProp.MAX_X).text = int_value_to_string(max_x)
    ET.SubElement(bounds, XmlProp.MAX_Y).text = int_value_to_string(max_y)
