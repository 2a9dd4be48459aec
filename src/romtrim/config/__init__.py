#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration module

Application settings, defaults and validation.
"""

from .settings import (
    AppConfig,
    LoggingSettings,
    ProcessingSettings,
    ScanSettings,
    get_app_config,
    reload_app_config,
    save_app_config,
)

__all__ = [
    "AppConfig",
    "ScanSettings",
    "ProcessingSettings",
    "LoggingSettings",
    "get_app_config",
    "reload_app_config",
    "save_app_config",
]
