"""
Backward tail scanner tests
"""

import io

import pytest

from romtrim.common.enums import ScanMethod
from romtrim.core.tail_scanner import TailScanner


class RecordingBytesIO(io.BytesIO):
    """BytesIO remembering every (offset, size) read"""

    def __init__(self, data):
        super().__init__(data)
        self.reads = []

    def read(self, size=-1):
        self.reads.append((self.tell(), size))
        return super().read(size)


@pytest.mark.unit
class TestTailScanner:
    """Doubling window scan from end of file"""

    def test_finds_last_sane_byte(self, rom_builder):
        data = rom_builder(content_length=10000, total_length=65536)
        reading = TailScanner(initial_window=4096).find_boundary(io.BytesIO(data))

        assert reading.method == ScanMethod.TAIL
        assert reading.boundary == 10000
        # 4 KiB, 8 KiB, 16 KiB of padding, then the 32 KiB window holding the content
        assert reading.reads == 4

    def test_windows_are_contiguous_and_never_overlap(self, rom_builder):
        handle = RecordingBytesIO(rom_builder(content_length=3000, total_length=65536, fill=0x00))
        reading = TailScanner(initial_window=1024).find_boundary(handle)

        assert reading.boundary == 3000
        window_end = 65536
        for offset, size in handle.reads:
            assert offset + size == window_end
            window_end = offset

    def test_window_sizes_double(self, rom_builder):
        handle = RecordingBytesIO(rom_builder(content_length=100, total_length=65536))
        TailScanner(initial_window=1024).find_boundary(handle)

        sizes = [size for _, size in handle.reads]
        assert sizes[:4] == [1024, 2048, 4096, 8192]

    def test_no_padding(self, rom_builder):
        data = rom_builder(content_length=20000, total_length=20000)
        reading = TailScanner().find_boundary(io.BytesIO(data))

        assert reading.boundary == 20000
        assert reading.reads == 1

    @pytest.mark.parametrize("fill", [0x00, 0xFF])
    def test_all_padding(self, fill):
        reading = TailScanner().find_boundary(io.BytesIO(bytes([fill]) * 100000))
        assert reading.boundary == 0
        assert reading.reads > 0

    def test_lower_bound_stops_the_scan(self, rom_builder):
        handle = RecordingBytesIO(rom_builder(content_length=10000, total_length=65536))
        reading = TailScanner(initial_window=4096).find_boundary(handle, lower_bound=20000)

        assert reading.boundary == 0
        assert reading.lower_bound == 20000
        assert min(offset for offset, _ in handle.reads) == 20000

    def test_lower_bound_beyond_end_of_file(self, rom_builder):
        data = rom_builder(content_length=100, total_length=200)
        reading = TailScanner().find_boundary(io.BytesIO(data), lower_bound=500)

        assert reading.boundary == 0
        assert reading.reads == 0

    def test_empty_file(self):
        assert TailScanner().find_boundary(io.BytesIO(b"")).boundary == 0

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            TailScanner(initial_window=0)
