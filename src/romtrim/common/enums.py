#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
RomTrim Enumeration Definitions
Unified management of all enumeration types in the application
"""

from enum import Enum, IntEnum


class LogLevel(IntEnum):
    """Log level enumeration"""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class ErrorSeverity(IntEnum):
    """Error severity level enumeration"""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


class Strategy(str, Enum):
    """Boundary detection strategy, chosen once per run"""

    HEADER_ONLY = "header_only"  # Trust the AEO, verify it against a short window
    HEADER_WITH_FALLBACK = "header_with_fallback"  # Paranoid, header is a lower bound
    SCAN_ONLY = "scan_only"  # Paranoid, header ignored


class ScanMethod(str, Enum):
    """Scanner used by the paranoid strategies"""

    TAIL = "tail"
    BISECT = "bisect"


class TrimState(Enum):
    """Trim orchestrator state machine"""

    IDLE = "idle"
    READING = "reading"
    DETECTING = "detecting"
    CLAMPING = "clamping"
    TRUNCATING = "truncating"
    DONE = "done"
    FAILED = "failed"


class TrimStatus(str, Enum):
    """Per-file outcome"""

    TRIMMED = "trimmed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


def get_enum_values(enum_class):
    """Get all values of enumeration class"""
    return [item.value for item in enum_class]

