"""
Positioned reads on a binary file handle

Every engine component reads through these helpers so that OS level
failures surface as :class:`ReadError`.
"""

import os
from typing import BinaryIO

from ..common.exceptions import ReadError


def _name_of(handle: BinaryIO) -> str:
    return str(getattr(handle, "name", "<stream>"))


def file_length(handle: BinaryIO) -> int:
    """Current length of the file behind ``handle``."""
    try:
        return handle.seek(0, os.SEEK_END)
    except (OSError, ValueError) as e:
        raise ReadError(f"Unable to determine file length: {e}", file_path=_name_of(handle)) from e


def read_region(handle: BinaryIO, offset: int, length: int) -> bytes:
    """Read up to ``length`` bytes starting at ``offset``.

    Fewer bytes are returned only when end of file is reached.
    """
    if offset < 0 or length < 0:
        raise ReadError(
            f"Invalid region [{offset}, {offset + length})", file_path=_name_of(handle)
        )
    if length == 0:
        return b""
    try:
        handle.seek(offset)
        parts = []
        remaining = length
        while remaining > 0:
            data = handle.read(remaining)
            if not data:
                break
            parts.append(data)
            remaining -= len(data)
        return b"".join(parts)
    except (OSError, ValueError) as e:
        raise ReadError(
            f"Unable to read {length} bytes at offset {offset}: {e}", file_path=_name_of(handle)
        ) from e
