"""
Utility function tests
"""

import pytest

from romtrim.common.exceptions import FileError
from romtrim.utils.file_ops import choose_new_file_name, copy_file_safely, has_extension
from romtrim.utils.math_ops import format_difference, format_size_bytes, is_power_of_two


@pytest.mark.unit
class TestMathOps:
    """Numeric helpers"""

    @pytest.mark.parametrize("number", [1, 2, 1024, 32 * 1024 * 1024, 2 ** 31])
    def test_powers_of_two(self, number):
        assert is_power_of_two(number)

    @pytest.mark.parametrize("number", [0, -2, 3, 100, 1023, 2 ** 31 - 1])
    def test_not_powers_of_two(self, number):
        assert not is_power_of_two(number)

    def test_format_size_bytes(self):
        assert format_size_bytes(0) == "0 B"
        assert format_size_bytes(512) == "512 B"
        assert format_size_bytes(1536) == "1.50 KB"
        assert format_size_bytes(8 * 1024 * 1024) == "8.00 MB"
        assert format_size_bytes(-2048) == "-2.00 KB"

    def test_format_difference(self):
        assert format_difference(-36) == "-36 (-36 B)"
        assert format_difference(0) == "0 (0 B)"


@pytest.mark.unit
class TestFileOps:
    """File helpers"""

    def test_has_extension(self):
        assert has_extension("game.nds", [".nds"])
        assert has_extension("/roms/GAME.NDS", [".nds"])
        assert not has_extension("game.nds.bak", [".nds"])
        assert not has_extension("nds", [".nds"])

    def test_choose_new_file_name(self, temp_dir):
        original = temp_dir / "game.nds"
        original.write_bytes(b"rom")

        first = choose_new_file_name(original)
        assert first.name == "game trim0.nds"

        first.write_bytes(b"rom")
        assert choose_new_file_name(original).name == "game trim1.nds"

    def test_choose_new_file_name_without_extension(self, temp_dir):
        original = temp_dir / "game"
        original.write_bytes(b"rom")
        assert choose_new_file_name(original).name == "game trim0"

    def test_copy_file_safely(self, temp_dir):
        src = temp_dir / "a.nds"
        src.write_bytes(b"rom data")
        dst = temp_dir / "copies" / "b.nds"

        assert copy_file_safely(src, dst)
        assert dst.read_bytes() == b"rom data"

    def test_copy_refuses_to_overwrite(self, temp_dir):
        src = temp_dir / "a.nds"
        src.write_bytes(b"new")
        dst = temp_dir / "b.nds"
        dst.write_bytes(b"old")

        with pytest.raises(FileError):
            copy_file_safely(src, dst)
        assert dst.read_bytes() == b"old"

    def test_copy_missing_source(self, temp_dir):
        with pytest.raises(FileError) as exc_info:
            copy_file_safely(temp_dir / "missing.nds", temp_dir / "b.nds")
        assert exc_info.value.error_code == "FILE_ERROR"
