class Packer:
    def __init__(self, size: int) -> None:
        self.data = bytearray(size)
        self.offset = 0

    def write(self, data: bytes) -> None:
        end = self.offset + len(data)
        assert end <= len(self.data), "write past end of buffer"
        self.data[self.offset : end] = data
        self.offset = end

    def write_interleaved(self, *planes: bytes) -> None:
        """ Write equal-length planes as interleaved records, e.g. B,G,R,A planes -> BGRA pixels. """
        stride = len(planes)
        count = len(planes[0])
        end = self.offset + stride * count
        assert end <= len(self.data), "write past end of buffer"
        for i, plane in enumerate(planes):
            assert len(plane) == count
            self.data[self.offset + i : end : stride] = plane
        self.offset = end

    def full(self) -> bool:
        return self.offset == len(self.data)
