from tgar.pixel import Pixel


def ramp(i: int, n: int) -> int:
    if n <= 1:
        return 0
    return i * 255 // (n - 1)


def gradient(width: int, height: int) -> list[Pixel]:
    """ Red rises left to right, green rises top to bottom. Opaque. """
    pixels = []
    for y in range(height):
        g = ramp(y, height)
        for x in range(width):
            pixels.append(Pixel(b=0, g=g, r=ramp(x, width), a=255))
    return pixels


def solid(width: int, height: int, pixel: Pixel) -> list[Pixel]:
    return [pixel] * (width * height)
