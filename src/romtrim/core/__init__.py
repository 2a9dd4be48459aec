"""
Boundary detection engine

Finds where the real content of a cartridge image ends and the power-of-two
padding begins, and truncates the file there.
"""

from .bisector import ChunkedBisector
from .boundary import find_boundary, find_boundary_forward
from .header import HeaderOffsetReader
from .models import HeaderReading, InspectionReport, RunConfig, ScanReading, TrimResult
from .orchestrator import TrimOrchestrator
from .padding import is_all_padding, is_padding
from .tail_scanner import TailScanner

__all__ = [
    "ChunkedBisector",
    "HeaderOffsetReader",
    "TailScanner",
    "TrimOrchestrator",
    "find_boundary",
    "find_boundary_forward",
    "is_all_padding",
    "is_padding",
    "HeaderReading",
    "InspectionReport",
    "RunConfig",
    "ScanReading",
    "TrimResult",
]
