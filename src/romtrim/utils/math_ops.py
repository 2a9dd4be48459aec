#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Numeric helpers
"""


def is_power_of_two(number: int) -> bool:
    """Whether ``number`` is a power of two (cartridge sizes always are)."""
    return number > 0 and number & (number - 1) == 0


def format_size_bytes(size_bytes: int, decimal_places: int = 2) -> str:
    """
    Format byte size to readable format

    Args:
        size_bytes: Byte size
        decimal_places: Decimal places

    Returns:
        Formatted size string, e.g., "1.23 MB"
    """
    if size_bytes == 0:
        return "0 B"

    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    unit_index = 0
    size = float(abs(size_bytes))
    sign = "-" if size_bytes < 0 else ""

    while size >= 1024 and unit_index < len(units) - 1:
        size /= 1024
        unit_index += 1

    if unit_index == 0:
        return f"{sign}{int(size)} {units[unit_index]}"
    return f"{sign}{size:.{decimal_places}f} {units[unit_index]}"


def format_difference(difference: int) -> str:
    """Byte count with a human readable size, e.g. ``-36 (-36 B)``."""
    return f"{difference} ({format_size_bytes(difference)})"
