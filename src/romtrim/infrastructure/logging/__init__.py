"""
Logging infrastructure for RomTrim
Unified logging management system
"""

from .logger import (
    RomTrimLogger,
    get_logger,
    log_exception,
    log_execution_time,
    log_performance,
    set_log_level,
)

__all__ = [
    "RomTrimLogger",
    "get_logger",
    "log_performance",
    "log_exception",
    "log_execution_time",
    "set_log_level",
]
