"""
Common definitions shared by every RomTrim layer
"""

from .constants import FileConstants, ProcessingConstants, ScanConstants
from .enums import ErrorSeverity, LogLevel, ScanMethod, Strategy, TrimState, TrimStatus
from .exceptions import (
    ConfigurationError,
    DetectionFailure,
    FileError,
    OpenError,
    ReadError,
    RomTrimError,
    TruncateError,
)

__all__ = [
    "FileConstants",
    "ProcessingConstants",
    "ScanConstants",
    "ErrorSeverity",
    "LogLevel",
    "ScanMethod",
    "Strategy",
    "TrimState",
    "TrimStatus",
    "RomTrimError",
    "ConfigurationError",
    "FileError",
    "OpenError",
    "ReadError",
    "DetectionFailure",
    "TruncateError",
]
