import pytest

from tgar.packutils import Packer


def test_write_interleaved():
    packer = Packer(2 + 6)
    packer.write(b"HD")
    packer.write_interleaved(b"abc", b"123")
    assert packer.full()
    assert bytes(packer.data) == b"HDa1b2c3"


def test_write_past_end_fails():
    packer = Packer(3)
    with pytest.raises(AssertionError):
        packer.write(b"1234")
