#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
RomTrim exception definitions
Every per-file failure the trim engine can report
"""

from typing import Any, Dict, Optional

from .enums import ErrorSeverity


class RomTrimError(Exception):
    """Base exception for the application"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.context = context or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary"""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "severity": self.severity.name,
            "context": self.context,
        }


class ConfigurationError(RomTrimError):
    """Invalid configuration"""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="CONFIG_ERROR", **kwargs)
        self.config_key = config_key


class FileError(RomTrimError):
    """Base class for errors tied to one file"""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        error_code: str = "FILE_ERROR",
        **kwargs,
    ):
        super().__init__(message, error_code=error_code, **kwargs)
        self.file_path = file_path
        self.operation = operation


class OpenError(FileError):
    """A read-write handle could not be obtained"""

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        super().__init__(message, file_path=file_path, operation="open", error_code="OPEN_ERROR", **kwargs)


class ReadError(FileError):
    """A seek or read failed while detecting the boundary"""

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        super().__init__(message, file_path=file_path, operation="read", error_code="READ_ERROR", **kwargs)


class DetectionFailure(FileError):
    """The last sane byte came back as zero, the file must not be touched"""

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        kwargs.setdefault("severity", ErrorSeverity.LOW)
        super().__init__(
            message, file_path=file_path, operation="detect", error_code="DETECTION_FAILED", **kwargs
        )


class TruncateError(FileError):
    """The resize call failed after a boundary was determined"""

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        super().__init__(
            message, file_path=file_path, operation="truncate", error_code="TRUNCATE_ERROR", **kwargs
        )


def format_error_for_user(error: RomTrimError) -> str:
    """Format an error for console display"""
    if isinstance(error, FileError) and error.file_path:
        return f"{error.message}\n{error.file_path}"
    if isinstance(error, ConfigurationError) and error.config_key:
        return f"{error.message}\nConfiguration key: {error.config_key}"
    return error.message
