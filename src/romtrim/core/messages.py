#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Standard Messages - every user-facing string printed by the CLI

Keeps wording in one place so per-file reports, summaries and errors read the
same wherever they are printed.
"""

from typing import List

from ..common.enums import ScanMethod, TrimStatus
from ..utils.math_ops import format_difference, format_size_bytes
from .models import InspectionReport, RunConfig, TrimResult


class StandardMessages:
    """Standardized console messages"""

    # =========================================================================
    # Usage / candidate messages
    # =========================================================================
    USAGE = "Usage: romtrim trim [-eip] rom1 rom2 romN..."
    NOTHING_TO_TRIM = "... I need something to trim, you know!"

    # =========================================================================
    # Mode messages
    # =========================================================================
    PARANOIA_MODE = "Running in Paranoia Mode..!"
    IGNORING_AEO = "Also ignoring the AEO..!"
    IGNORING_EXTENSIONS = "Ignoring file extensions..."
    BISECT_MODE = "Scanning with the chunked binary search..."
    DRY_RUN_MODE = "Dry run, no file will be resized..."

    # =========================================================================
    # Per-file messages
    # =========================================================================
    FILE_READING = "Reading {filename}:"
    FILE_RESIZING = "Resizing {filename}:"
    FILE_SIZES = "Previously: {original}, Now: {new}, Difference: {difference}"
    FILE_DONE = "Done"
    FILE_UNCHANGED = "{filename} is already trimmed."
    AEO_READ = "Read the Application End Offset: {offset}"
    AEO_CORRECT = "AEO is correct."
    AEO_INCORRECT = "AEO is incorrect by {discrepancy}, corrected to: {boundary}"
    AEO_UNTRUSTED = "AEO is untrustworthy: {reason}"
    WIFI_HINT = "This is probably a wi-fi enabled game."
    SCAN_FOUND = "Found last sane byte: {boundary} ({reads} reads, {method})"
    CLAMPED = "The AEO suggests that the ROM is larger than what the paranoia check found, kept the AEO."

    OPEN_FAILED = "I can't read the file at all. Check you have read and write permissions for this file, and that it still exists:"
    RESIZE_FAILED = "BOOM. Something's gone wrong. Check you have write permissions for this file:"
    DETECTION_FAILED = "Something has gone wrong -- the last sane byte came back as zero. I will not touch the file as a result."

    # =========================================================================
    # Summary messages
    # =========================================================================
    TOTAL_DIFFERENCE = "Total difference: {difference}"
    FILES_FAILED = "{count} file(s) could not be trimmed"

    # =========================================================================
    # Status Indicators
    # =========================================================================
    SUCCESS_ICON = "✅"
    ERROR_ICON = "❌"
    WARNING_ICON = "⚠️"
    INFO_ICON = "ℹ️"

    @staticmethod
    def format_mode_lines(config: RunConfig) -> List[str]:
        """Announce the switches of this run"""
        lines = []
        if config.paranoid or config.ignore_header:
            lines.append(StandardMessages.PARANOIA_MODE)
        if config.ignore_header:
            lines.append(StandardMessages.IGNORING_AEO)
        if config.ignore_extension:
            lines.append(StandardMessages.IGNORING_EXTENSIONS)
        if config.scan_method == ScanMethod.BISECT and (config.paranoid or config.ignore_header):
            lines.append(StandardMessages.BISECT_MODE)
        if config.dry_run:
            lines.append(StandardMessages.DRY_RUN_MODE)
        return lines

    @staticmethod
    def format_error_heading(result: TrimResult) -> str:
        """Distinct heading for open or read failures, resize failures and detection failures"""
        if result.error_code in ("OPEN_ERROR", "READ_ERROR"):
            return StandardMessages.OPEN_FAILED
        if result.error_code == "DETECTION_FAILED":
            return StandardMessages.DETECTION_FAILED
        return StandardMessages.RESIZE_FAILED

    @staticmethod
    def format_sizes(result: TrimResult) -> str:
        return StandardMessages.FILE_SIZES.format(
            original=result.original_length,
            new=result.new_length,
            difference=result.difference,
        )

    @staticmethod
    def format_result_summary(result: TrimResult) -> str:
        """One-line summary of a file's outcome"""
        if result.status == TrimStatus.FAILED:
            return f"{StandardMessages.ERROR_ICON} {result.path}: {result.error}"
        if result.error:
            return f"{StandardMessages.WARNING_ICON} {result.path}: {result.error}"
        if result.status == TrimStatus.UNCHANGED:
            return f"{StandardMessages.INFO_ICON} {StandardMessages.FILE_UNCHANGED.format(filename=result.path)}"
        return (
            f"{StandardMessages.SUCCESS_ICON} {result.path}: "
            f"{format_size_bytes(result.original_length)} -> {format_size_bytes(result.new_length)}"
        )

    @staticmethod
    def format_total(total_difference: int) -> str:
        return StandardMessages.TOTAL_DIFFERENCE.format(difference=format_difference(total_difference))

    @staticmethod
    def format_inspection(report: InspectionReport) -> List[str]:
        """Lines describing every detection method's answer"""
        if report.error:
            return [f"{StandardMessages.ERROR_ICON} {report.path}: {report.error}"]

        lines = [f"{report.path} ({report.file_length} bytes, "
                 f"{'power of two' if report.power_of_two else 'not a power of two'})"]

        header = report.header
        if header is not None:
            if header.trusted:
                lines.append(f"  Header: declared {header.declared_offset}, verified {header.boundary}"
                             f" (discrepancy {header.discrepancy})")
                if header.wifi_hint:
                    lines.append(f"  {StandardMessages.WIFI_HINT}")
            else:
                lines.append(f"  Header: {StandardMessages.AEO_UNTRUSTED.format(reason=header.reason)}")

        for label, scan in (("Tail scan", report.tail), ("Bisect", report.bisect)):
            if scan is not None:
                lines.append(f"  {label}: {scan.boundary} ({scan.reads} reads)")

        icon = StandardMessages.SUCCESS_ICON if report.agree else StandardMessages.WARNING_ICON
        lines.append(f"  {icon} {'All methods agree' if report.agree else 'Methods disagree'}")
        return lines
