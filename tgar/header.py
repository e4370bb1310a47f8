from typing import Final

import struct

# http://www.paulbourke.net/dataformats/tga/

IMAGE_ID: Final = b"drewcrawford/tgar"

COLOR_MAP_NONE: Final = 0
IMAGE_TYPE_TRUECOLOR: Final = 2     # uncompressed, no color map
PIXEL_DEPTH: Final = 32             # bits per pixel, BGRA

# Bits 3-0: attribute (alpha) bits per pixel. Bit 4: reserved, 0.
# Bit 5: origin, 0 = lower left, 1 = upper left. Bits 7-6: no interleaving.
ALPHA_BITS: Final = 8
ORIGIN_UPPER_LEFT: Final = 1 << 5
IMAGE_DESCRIPTOR: Final = ALPHA_BITS | ORIGIN_UPPER_LEFT

HEADER_STRUCT: Final = struct.Struct(f"<BBB5sHHHHBB{len(IMAGE_ID)}s")
HEADER_SIZE: Final = HEADER_STRUCT.size

U16_MAX: Final = 0xFFFF


def check_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if not 0 <= value <= U16_MAX:
            raise ValueError(f"TGA {name} must fit in 16 bits, got {value}")


def header_fields(width: int, height: int) -> tuple:
    check_dimensions(width, height)
    return (
        len(IMAGE_ID),          # idFieldLength
        COLOR_MAP_NONE,         # colorMapType
        IMAGE_TYPE_TRUECOLOR,   # imageType
        b"\0" * 5,              # color map spec: first entry, length, entry size
        0,                      # x origin
        0,                      # y origin
        width,
        height,
        PIXEL_DEPTH,
        IMAGE_DESCRIPTOR,
        IMAGE_ID,
    )


def build_header(width: int, height: int) -> bytes:
    return HEADER_STRUCT.pack(*header_fields(width, height))
