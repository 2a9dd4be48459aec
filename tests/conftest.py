"""
Pytest configuration and fixtures for RomTrim tests
"""

import shutil
import struct
import tempfile
from pathlib import Path

import pytest


def make_content(length: int) -> bytearray:
    """Bytes that never contain a padding value (0x01 .. 0xFE)"""
    return bytearray((i % 254) + 1 for i in range(length))


def build_rom(
    content_length: int,
    total_length: int,
    fill: int = 0xFF,
    aeo: int = None,
    field_offset: int = 0x80,
) -> bytes:
    """Build a ROM image: ``content_length`` sane bytes padded with ``fill``.

    When ``aeo`` is given it is stored little-endian at ``field_offset``,
    which must lie inside the content.
    """
    data = make_content(content_length)
    if aeo is not None:
        data[field_offset:field_offset + 4] = struct.pack("<I", aeo)
    return bytes(data) + bytes([fill]) * (total_length - content_length)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def rom_file(temp_dir):
    """Factory writing a ROM image into ``temp_dir``"""

    def _write(name: str = "game.nds", **kwargs) -> Path:
        path = temp_dir / name
        path.write_bytes(build_rom(**kwargs))
        return path

    return _write


@pytest.fixture
def rom_builder():
    """The :func:`build_rom` helper, for tests that need raw bytes"""
    return build_rom
