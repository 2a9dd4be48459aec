"""
Boundary scanning inside a single byte window
"""

from .padding import is_padding


def find_boundary(window: bytes) -> int:
    """Find where dummy data begins inside ``window``.

    Scans from the end of the window towards the start and stops at the first
    byte that is not padding.

    Returns:
        ``i + 1`` for the highest index ``i`` holding a non-padding byte, i.e.
        the number of leading bytes to keep. ``0`` when the whole window (or
        an empty window) is padding.
    """
    for i in range(len(window) - 1, -1, -1):
        if not is_padding(window[i]):
            # Sizes are one-based, offsets zero-based
            return i + 1
    return 0


def find_boundary_forward(window: bytes) -> int:
    """Same result as :func:`find_boundary`, computed front to back."""
    last_sane_byte = 0
    for i, byte in enumerate(window):
        if not is_padding(byte):
            last_sane_byte = i + 1
    return last_sane_byte
