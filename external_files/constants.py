class ExternalFiles:
    LAYOUT_FILE = "layout.xml"
    LAYOUTINFO_FILE = "layoutinfo.json"


class XmlRoot:
    LAYOUT = "Layout"


class XmlNode:
    SPRITES = "Sprites"
    SPRITE = "Sprite"
    SUBMAP = "SubMap"
    SUBENTRY = "Sub"
    CHUNKS = "Chunks"
    CHUNK = "Chunk"
    CANVAS = "Canvas"
    BOUNDS = "Bounds"


class XmlProp:
    VARIANT = "Variant"
    ID = "Id"
    EXACTTYPE = "ExactType"
    DEPENDSON = "DependsOn"
    CHUNKOFFSET = "ChunkOffset"
    CHUNKCOUNT = "ChunkCount"
    INDEX = "Index"
    IMG_X = "ImgX"
    IMG_Y = "ImgY"
    CHUNK_X = "ChunkX"
    CHUNK_Y = "ChunkY"
    WIDTH = "Width"
    HEIGHT = "Height"
    BASEDEP = "BaseDep"
    MIN_X = "MinX"
    MIN_Y = "MinY"
    MAX_X = "MaxX"
    MAX_Y = "MaxY"


VARIANT_NAMES = {
    "Base": "base",
    "Sub": "sub",
    "Dependent": "dependent",
    "Overlay": "overlay",
}
