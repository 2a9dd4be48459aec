"""
Padding classification and in-window boundary tests
"""

import random

import pytest

from romtrim.core.boundary import find_boundary, find_boundary_forward
from romtrim.core.padding import is_all_padding, is_padding


@pytest.mark.unit
class TestIsPadding:
    """Single byte classification"""

    @pytest.mark.parametrize("byte", [0x00, 0xFF, -1, 0x1FF])
    def test_sentinels(self, byte):
        assert is_padding(byte)

    @pytest.mark.parametrize("byte", [0x01, 0x41, 0x7F, 0x80, 0xFE])
    def test_content_bytes(self, byte):
        assert not is_padding(byte)


@pytest.mark.unit
class TestIsAllPadding:
    """Whole window classification"""

    def test_empty_window(self):
        assert is_all_padding(b"")

    @pytest.mark.parametrize("fill", [0x00, 0xFF])
    def test_uniform_window(self, fill):
        assert is_all_padding(bytes([fill]) * 4096)

    def test_mixed_sentinels(self):
        assert is_all_padding(b"\x00\xff" * 512)

    @pytest.mark.parametrize("position", [0, 1, 2047, 4095])
    def test_injected_byte(self, position):
        window = bytearray(b"\xff" * 4096)
        window[position] = 0x42
        assert not is_all_padding(bytes(window))


@pytest.mark.unit
class TestFindBoundary:
    """Backward scan inside a window"""

    def test_empty_window(self):
        assert find_boundary(b"") == 0

    def test_all_padding(self):
        assert find_boundary(b"\xff" * 100) == 0
        assert find_boundary(b"\x00" * 100) == 0

    def test_single_content_byte(self):
        assert find_boundary(b"\x01") == 1

    def test_trailing_padding(self):
        assert find_boundary(b"abc" + b"\xff" * 10) == 3

    def test_padding_inside_content_is_kept(self):
        assert find_boundary(b"\x00\x00\x05\x00") == 3
        assert find_boundary(b"a\xffb\x00\xff") == 3

    def test_no_padding(self):
        assert find_boundary(b"romdata") == 7

    def test_boundary_property(self):
        """Everything from k on is padding, byte k-1 is not"""
        rng = random.Random(1234)
        for _ in range(200):
            size = rng.randint(0, 64)
            window = bytes(rng.choice([0x00, 0xFF, 0x00, 0xFF, 0x33]) for _ in range(size))
            k = find_boundary(window)

            assert is_all_padding(window[k:])
            if k > 0:
                assert not is_padding(window[k - 1])
            else:
                assert is_all_padding(window)

    def test_forward_and_backward_agree(self):
        rng = random.Random(99)
        for _ in range(200):
            size = rng.randint(0, 64)
            window = bytes(rng.choice([0x00, 0xFF, 0x10, 0xA5]) for _ in range(size))
            assert find_boundary(window) == find_boundary_forward(window)
