#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Utility functions
"""

from .file_ops import choose_new_file_name, copy_file_safely, has_extension
from .math_ops import format_difference, format_size_bytes, is_power_of_two

__all__ = [
    "choose_new_file_name",
    "copy_file_safely",
    "has_extension",
    "format_difference",
    "format_size_bytes",
    "is_power_of_two",
]
