#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
RomTrim logging system
Configures the ``romtrim`` logger hierarchy once per process
"""

import functools
import logging
import sys
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from ...common.constants import FileConstants
from ...common.enums import LogLevel


class RomTrimLogger:
    """Application log manager"""

    _instance: Optional["RomTrimLogger"] = None
    _initialized: bool = False

    def __new__(cls) -> "RomTrimLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if RomTrimLogger._initialized:
            return

        self._loggers: Dict[str, logging.Logger] = {}
        self._setup_root_logger()
        RomTrimLogger._initialized = True

    def _setup_root_logger(self):
        """Set up the root application logger"""
        root_logger = logging.getLogger("romtrim")
        root_logger.setLevel(logging.DEBUG)

        # Avoid adding handlers twice
        if root_logger.handlers:
            return

        console_level = logging.WARNING
        log_to_file = True
        max_size = FileConstants.LOG_MAX_SIZE
        backup_count = FileConstants.LOG_BACKUP_COUNT
        try:
            from ...config import get_app_config

            config = get_app_config()
            console_level = getattr(logging, config.logging.log_level.upper(), logging.WARNING)
            log_to_file = config.logging.log_to_file
            max_size = config.logging.log_file_max_size
            backup_count = config.logging.log_backup_count
        except Exception:
            # Fall back to defaults when the configuration cannot be read
            pass

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

        if log_to_file:
            try:
                log_dir = Path.home() / FileConstants.CONFIG_DIR_NAME
                log_dir.mkdir(exist_ok=True)
                log_file = log_dir / FileConstants.LOG_FILE_NAME

                file_handler = RotatingFileHandler(
                    log_file,
                    maxBytes=max_size,
                    backupCount=backup_count,
                    encoding="utf-8",
                )
                file_handler.setLevel(logging.DEBUG)
                file_formatter = logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
                file_handler.setFormatter(file_formatter)
                root_logger.addHandler(file_handler)
            except OSError as e:
                # Console logging still works without the file
                root_logger.warning(f"Failed to setup file logging: {e}")

        self._loggers["root"] = root_logger

    def get_logger(self, name: str) -> logging.Logger:
        """Get a named logger"""
        if name not in self._loggers:
            logger = logging.getLogger(f"romtrim.{name}")
            self._loggers[name] = logger
        return self._loggers[name]

    def set_console_level(self, level: LogLevel):
        """Set the level of the console handler"""
        root_logger = logging.getLogger("romtrim")
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(int(level))

    def log_exception(
        self, logger_name: str, exc: Exception, context: Optional[Dict[str, Any]] = None
    ):
        """Log an exception with optional context"""
        logger = self.get_logger(logger_name)
        context_str = ""
        if context:
            context_str = f" Context: {context}"
        logger.error(
            f"Exception occurred: {type(exc).__name__}: {exc}{context_str}",
            exc_info=True,
        )

    def log_performance(
        self, logger_name: str, operation: str, duration: float, **kwargs
    ):
        """Log a timing measurement"""
        logger = self.get_logger(logger_name)
        extra_info = " ".join(f"{k}={v}" for k, v in kwargs.items())
        logger.debug(f"Performance: {operation} took {duration:.3f}s {extra_info}")


# Global log manager instance
_logger_manager = RomTrimLogger()


def get_logger(name: str = "root") -> logging.Logger:
    """Convenience wrapper returning ``romtrim.<name>``"""
    return _logger_manager.get_logger(name)


def set_log_level(level: LogLevel):
    """Set the console log level"""
    _logger_manager.set_console_level(level)


def log_exception(
    exc: Exception, logger_name: str = "root", context: Optional[Dict[str, Any]] = None
):
    _logger_manager.log_exception(logger_name, exc, context)


def log_performance(
    operation: str, duration: float, logger_name: str = "performance", **kwargs
):
    _logger_manager.log_performance(logger_name, operation, duration, **kwargs)


def log_execution_time(logger_name: str = "performance"):
    """Decorator: log how long the wrapped function took"""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                duration = time.time() - start_time
                log_performance(func.__name__, duration, logger_name)
                return result
            except Exception:
                duration = time.time() - start_time
                log_performance(f"{func.__name__} (failed)", duration, logger_name)
                raise

        return wrapper

    return decorator
