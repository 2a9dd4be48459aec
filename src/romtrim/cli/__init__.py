#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI Module - command line interface

Key Components:
- commands.py: trim, inspect and config commands
- formatters.py: Result formatting utilities
"""

from .commands import config_command, inspect_command, trim_command
from .formatters import format_batch_summary, format_inspection, format_result

__all__ = [
    # Commands
    "trim_command",
    "inspect_command",
    "config_command",
    # Formatters
    "format_result",
    "format_batch_summary",
    "format_inspection",
]
