from tgar.header import HEADER_SIZE, IMAGE_ID, build_header
from tgar.pixel import Pixel
from tgar.tga import BGRAImage, PixelCountMismatch, pack_tga


def encode(width: int, height: int, pixels: list[Pixel]) -> bytes:
    return bytes(BGRAImage.encode(width, height, pixels))
