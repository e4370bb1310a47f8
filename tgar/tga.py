from dataclasses import dataclass, field
from typing import Sequence

from tgar.header import HEADER_SIZE, build_header, check_dimensions
from tgar.packutils import Packer
from tgar.pixel import Pixel, PIXEL_SIZE


class PixelCountMismatch(ValueError):
    pass


def check_pixel_count(width: int, height: int, count: int) -> None:
    if count != width * height:
        raise PixelCountMismatch(f"{width}x{height} image needs {width * height} pixels, got {count}")


@dataclass
class BGRAImage:
    """
    A 32-bit BGRA image encoded as an uncompressed true-color TGA file.

    Once encoded, the image only holds the raw file bytes. Pixels are not kept
    around in structured form.
    """

    data: bytearray = field(default_factory=bytearray)
    "Complete TGA file: header followed by pixel data. Empty for a default image."

    width: int = field(default=0, compare=False)
    height: int = field(default=0, compare=False)

    @staticmethod
    def encode(width: int, height: int, pixels: Sequence[Pixel]) -> 'BGRAImage':
        """
        Encode pixels into a TGA file.

        Pixels are written verbatim in the order given. With the upper-left
        origin, pixels[0] is the top-left corner and rows follow top to bottom.
        """
        check_dimensions(width, height)
        check_pixel_count(width, height, len(pixels))

        packer = Packer(HEADER_SIZE + PIXEL_SIZE * len(pixels))
        packer.write(build_header(width, height))
        packer.write_interleaved(
            bytes(p.b for p in pixels),
            bytes(p.g for p in pixels),
            bytes(p.r for p in pixels),
            bytes(p.a for p in pixels))
        assert packer.full()

        return BGRAImage(packer.data, width, height)

    @staticmethod
    def from_bgra_bytes(width: int, height: int, bgra: bytes) -> 'BGRAImage':
        if len(bgra) % PIXEL_SIZE != 0:
            raise PixelCountMismatch(f"BGRA data length {len(bgra)} is not a multiple of {PIXEL_SIZE}")
        check_dimensions(width, height)
        check_pixel_count(width, height, len(bgra) // PIXEL_SIZE)

        packer = Packer(HEADER_SIZE + len(bgra))
        packer.write(build_header(width, height))
        packer.write(bgra)
        assert packer.full()

        return BGRAImage(packer.data, width, height)

    @staticmethod
    def from_bytes(data: bytes) -> 'BGRAImage':
        # No validation: the caller vouches that this is a TGA file.
        return BGRAImage(bytearray(data))

    def into_data(self) -> bytearray:
        """ Hand over the encoded buffer. The image is left empty. """
        data = self.data
        self.data = bytearray()
        self.width = 0
        self.height = 0
        return data

    def view(self) -> memoryview:
        return memoryview(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __len__(self) -> int:
        return len(self.data)


def pack_tga(bgra_image: bytes, width: int, height: int) -> bytes:
    return bytes(BGRAImage.from_bgra_bytes(width, height, bgra_image))
