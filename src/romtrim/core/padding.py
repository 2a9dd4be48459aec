"""
Padding classification

Untrimmed ROMs are filled up to a power-of-two cartridge size with a single
filler value, either all zero bits or all one bits.
"""

from ..common.constants import ScanConstants

_SENTINELS = (ScanConstants.ALL_ZEROES, ScanConstants.ALL_ONES)


def is_padding(byte: int) -> bool:
    """Whether a single byte is dummy data.

    Compared as a bit pattern, so ``-1`` (a signed 0xFF) counts as padding too.
    """
    return (byte & 0xFF) in _SENTINELS


def is_all_padding(window: bytes) -> bool:
    """Whether every byte of the window is dummy data (true when empty)."""
    for byte in window:
        if not is_padding(byte):
            return False
    return True
