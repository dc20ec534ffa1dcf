"""
LAY file format constants.
"""


class LayFormat:
    LENGTH_HEADER = 8  # [u32 sprite_count][u32 chunk_count]
    LENGTH_SPRITE = 12  # [u8 id][u8 aux_id][u8 flags][u8 type][u32 offset][u32 count]
    LENGTH_CHUNK = 16  # [f32 img_x][f32 img_y][f32 chunk_x][f32 chunk_y]
    CHUNK_FIELDS = 4
    SPRITE_SIZE_PAD = 32
    # Leading u32 above this is not a plausible sprite count
    SPRITES_MAX_RAW = 65536


class SpriteTag:
    BASE = 0x00
    SUB = 0x20
    DEPENDENT = (0x30, 0x40, 0x60)
    OVERLAY = 0x50


# Expected flags byte of an overlay sprite, all other sprites expect 0
OVERLAY_FLAGS = 16
