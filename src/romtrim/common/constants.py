#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
RomTrim constant definitions
Central place for sizes, offsets and file names used across the application
"""


class ScanConstants:
    """Boundary detection constants"""

    # Sentinel fill values
    ALL_ZEROES = 0x00
    ALL_ONES = 0xFF

    # Bisector chunk size
    CHUNK_SIZE = 32 * 1024  # 32KB

    # Amount checked after the Application End Offset, in case it is wrong
    AEO_BUFFER = 4 * 1024  # 4KB
    # Initial window when scanning backwards from end of file
    PARANOIA_BUFFER = 4 * 1024  # 4KB

    # Header field holding the Application End Offset (little-endian uint32)
    AEO_FIELD_OFFSET = 8 * 16
    AEO_FIELD_SIZE = 4

    # Discrepancy seen on wi-fi enabled games (RSA signature after the AEO)
    WIFI_ENABLED_GAME_ADDITIONAL_OFFSET = 136


class FileConstants:
    """File and path related constants"""

    # Candidate files
    DS_ROM_EXTENSION = ".nds"
    OPEN_MODE = "r+b"  # Read and write access to file

    # Sibling copies
    COPY_SUFFIX = " trim"

    # Configuration files
    CONFIG_DIR_NAME = ".romtrim"
    DEFAULT_CONFIG_FILE = "config.yaml"

    # Log files
    LOG_FILE_NAME = "romtrim.log"
    LOG_MAX_SIZE = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT = 5


class ProcessingConstants:
    """Batch processing constants"""

    DEFAULT_MAX_WORKERS = 1
    MAX_WORKERS_LIMIT = 32
