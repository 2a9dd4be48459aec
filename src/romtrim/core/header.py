"""
Application End Offset reader

The DS ROM header stores the total used ROM size as a little-endian uint32 at
offset 0x80. The value is read, then a short window after it is scanned in
case it is wrong.
"""

import struct
from typing import BinaryIO, Optional

from ..common.constants import ScanConstants
from ..infrastructure.logging import get_logger
from .boundary import find_boundary
from .file_io import file_length, read_region
from .models import HeaderReading

logger = get_logger("header")

_AEO_FORMAT = "<I"


class HeaderOffsetReader:
    """Read and verify the header's end-of-content field"""

    def __init__(
        self,
        field_offset: int = ScanConstants.AEO_FIELD_OFFSET,
        verify_window: int = ScanConstants.AEO_BUFFER,
        wifi_discrepancy: int = ScanConstants.WIFI_ENABLED_GAME_ADDITIONAL_OFFSET,
    ):
        self.field_offset = field_offset
        self.verify_window = verify_window
        self.wifi_discrepancy = wifi_discrepancy

    def read_declared_offset(self, handle: BinaryIO, length: int) -> Optional[int]:
        """Raw header value, or None when the file is too short to hold it."""
        if self.field_offset + ScanConstants.AEO_FIELD_SIZE > length:
            return None
        raw = read_region(handle, self.field_offset, ScanConstants.AEO_FIELD_SIZE)
        if len(raw) < ScanConstants.AEO_FIELD_SIZE:
            return None
        return struct.unpack(_AEO_FORMAT, raw)[0]

    def read(self, handle: BinaryIO, length: Optional[int] = None) -> HeaderReading:
        """Read the AEO and verify it against the bytes that follow it.

        Returns:
            HeaderReading; ``trusted`` is False when the field cannot be read
            or points past end of file
        """
        if length is None:
            length = file_length(handle)

        declared = self.read_declared_offset(handle, length)
        if declared is None:
            logger.warning(f"File too short ({length} bytes) to hold the Application End Offset")
            return HeaderReading(declared_offset=0, trusted=False, reason="header too short")

        logger.info(f"Read the Application End Offset: {declared}")

        if declared > length:
            logger.warning(f"Application End Offset {declared} lies beyond end of file ({length})")
            return HeaderReading(declared_offset=declared, trusted=False, reason="offset beyond end of file")

        # Check some of the file after the AEO to be sure it was correct
        window = read_region(handle, declared, min(self.verify_window, length - declared))
        discrepancy = find_boundary(window)
        boundary = declared + discrepancy
        wifi_hint = discrepancy != 0 and discrepancy == self.wifi_discrepancy

        if discrepancy == 0:
            logger.info("AEO is correct.")
        else:
            logger.info(f"AEO is incorrect by {discrepancy}, corrected to: {boundary}")
            if wifi_hint:
                logger.info("This is probably a wi-fi enabled game.")

        return HeaderReading(
            declared_offset=declared,
            boundary=boundary,
            discrepancy=discrepancy,
            trusted=True,
            wifi_hint=wifi_hint,
        )
