"""
Paranoia mode: scan backwards from end of file

Windows grow exponentially. Each new window ends where the previous one
started, so confirmed padding is never read twice.
"""

from typing import BinaryIO, Optional

from ..common.constants import ScanConstants
from ..common.enums import ScanMethod
from ..infrastructure.logging import get_logger
from .boundary import find_boundary
from .file_io import file_length, read_region
from .models import ScanReading

logger = get_logger("tail_scanner")


class TailScanner:
    """Backward scanner with a doubling window"""

    def __init__(self, initial_window: int = ScanConstants.PARANOIA_BUFFER):
        if initial_window <= 0:
            raise ValueError("initial_window must be greater than 0")
        self.initial_window = initial_window

    def find_boundary(
        self, handle: BinaryIO, length: Optional[int] = None, lower_bound: int = 0
    ) -> ScanReading:
        """Find the last sane byte, never looking below ``lower_bound``.

        Returns:
            ScanReading whose boundary is ``0`` when everything between
            ``lower_bound`` and end of file is padding
        """
        if length is None:
            length = file_length(handle)
        lower_bound = max(0, min(lower_bound, length))

        window_end = length
        window_size = self.initial_window
        reads = 0

        while window_end > lower_bound:
            window_start = max(lower_bound, window_end - window_size)
            window = read_region(handle, window_start, window_end - window_start)
            reads += 1

            local_offset = find_boundary(window)
            logger.debug(f"Buffer size: {window_end - window_start}, last sane byte in buffer: {local_offset}")

            if local_offset:
                boundary = window_start + local_offset
                logger.info(f"Found last sane byte: {boundary}")
                return ScanReading(
                    method=ScanMethod.TAIL, boundary=boundary, reads=reads, lower_bound=lower_bound
                )

            window_end = window_start
            window_size *= 2

        logger.info(f"No sane byte found above offset {lower_bound}")
        return ScanReading(method=ScanMethod.TAIL, boundary=0, reads=reads, lower_bound=lower_bound)
