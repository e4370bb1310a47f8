import dataclasses

import pytest

from tgar.patterns import gradient, solid
from tgar.pixel import Pixel


def test_default_pixel_is_transparent_black():
    assert Pixel() == Pixel(0, 0, 0, 0)


def test_rgba_tuple_conversion():
    pixel = Pixel.from_rgba((255, 127, 3, 0))
    assert (pixel.b, pixel.g, pixel.r, pixel.a) == (3, 127, 255, 0)
    assert pixel.to_rgba() == (255, 127, 3, 0)


def test_bytes_are_bgra():
    assert bytes(Pixel(b=1, g=2, r=3, a=4)) == b"\x01\x02\x03\x04"


def test_pixel_is_immutable_and_hashable():
    pixel = Pixel(1, 2, 3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pixel.r = 9
    assert len({pixel, Pixel(1, 2, 3, 4)}) == 1


def test_gradient_is_row_major():
    pixels = gradient(3, 2)
    assert len(pixels) == 6
    assert [p.r for p in pixels] == [0, 127, 255, 0, 127, 255]
    assert [p.g for p in pixels] == [0, 0, 0, 255, 255, 255]
    assert all(p.b == 0 and p.a == 255 for p in pixels)


def test_gradient_degenerate_sizes():
    assert gradient(0, 5) == []
    assert gradient(1, 1) == [Pixel(b=0, g=0, r=0, a=255)]


def test_solid():
    red = Pixel(r=255, a=255)
    assert solid(2, 3, red) == [red] * 6
