"""
Chunked binary search for the start of trailing padding

Imagine the file is made of chunks of ``chunk_size`` bytes. The whole file is
the first active area:

1. Take the middle chunk of the active area and test it for padding.
2. If it is all padding, the first half becomes the new active area.
3. Otherwise the second half (minus the middle) becomes the active area.
4. Repeat until the first chunk made up entirely of padding is found.
5. Scan the chunk before it byte by byte to find where the padding begins.

The search assumes the trailing padding is one contiguous run. Content that
reappears after a wholly padded chunk is not detected, and the boundary found
is then too early.
"""

from typing import BinaryIO, Optional

from ..common.constants import ScanConstants
from ..common.enums import ScanMethod
from ..infrastructure.logging import get_logger
from .boundary import find_boundary
from .file_io import file_length, read_region
from .models import ScanReading
from .padding import is_all_padding

logger = get_logger("bisector")


class ChunkedBisector:
    """Binary search over fixed-size chunks of a file"""

    def __init__(self, chunk_size: int = ScanConstants.CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be greater than 0")
        self.chunk_size = chunk_size

    def _chunk_span(self, chunk: int, length: int) -> int:
        # The final chunk is shorter when the length is not a multiple of the chunk size
        return min(self.chunk_size, length - chunk * self.chunk_size)

    def find_boundary(self, handle: BinaryIO, length: Optional[int] = None) -> ScanReading:
        """Locate the end of content in ``handle``.

        Args:
            handle: Seekable binary handle
            length: File length, measured from the handle when omitted

        Returns:
            ScanReading whose boundary is ``0`` when the whole file is padding
        """
        if length is None:
            length = file_length(handle)

        number_of_chunks = -(-length // self.chunk_size)
        logger.debug(f"Total number of chunks: {number_of_chunks}")

        begin, end = 0, number_of_chunks
        reads = 0
        while begin != end:
            # Floor division picks the lower middle
            middle = begin + (end - begin) // 2
            window = read_region(handle, middle * self.chunk_size, self._chunk_span(middle, length))
            reads += 1

            if is_all_padding(window):
                end = middle
            else:
                begin = middle + 1

        if begin == 0:
            logger.debug("Every chunk is padding")
            return ScanReading(method=ScanMethod.BISECT, boundary=0, reads=reads)

        # Chunk ``begin`` (if any) is the first one made of padding. Rescan the
        # chunk before it; when it is the last chunk this reaches end of file.
        region_start = (begin - 1) * self.chunk_size
        region_end = min(length, begin * self.chunk_size)
        window = read_region(handle, region_start, region_end - region_start)
        reads += 1

        boundary = region_start + find_boundary(window)
        logger.debug(f"First padding chunk {begin}, last sane byte: {boundary} ({reads} reads)")
        return ScanReading(method=ScanMethod.BISECT, boundary=boundary, reads=reads)
