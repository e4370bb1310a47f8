from dataclasses import dataclass
import struct

PIXEL_STRUCT = struct.Struct("<BBBB")
PIXEL_SIZE = PIXEL_STRUCT.size


@dataclass(frozen=True)
class Pixel:
    """
    A 32-bit BGRA pixel.

    Field order matches the memory layout: blue, green, red, alpha, one byte each.
    Channel values are not validated here; anything outside 0-255 is caught by
    struct when the pixel is packed.
    """

    b: int = 0
    g: int = 0
    r: int = 0
    a: int = 0

    @staticmethod
    def from_rgba(rgba: tuple[int, int, int, int]) -> 'Pixel':
        r, g, b, a = rgba
        return Pixel(b=b, g=g, r=r, a=a)

    def to_rgba(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    def __bytes__(self) -> bytes:
        return PIXEL_STRUCT.pack(self.b, self.g, self.r, self.a)
