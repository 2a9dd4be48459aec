#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI Result Formatters

Prints trim results, inspection reports and run summaries through
``typer.echo`` using the wording in StandardMessages.
"""

from pathlib import Path

import typer

from ..common.enums import TrimStatus
from ..core.messages import StandardMessages
from ..core.models import InspectionReport, TrimResult
from ..services.batch_service import BatchResult


def format_result(result: TrimResult, verbose: bool = False, quiet: bool = False):
    """Format and display one file's outcome

    Args:
        result: TrimResult from the orchestrator
        verbose: Whether to show header and scan details
        quiet: One summary line per file instead of the full report
    """
    if quiet:
        typer.echo(StandardMessages.format_result_summary(result), err=result.status == TrimStatus.FAILED)
        return

    filename = Path(result.path).name

    if result.status == TrimStatus.FAILED:
        typer.echo(StandardMessages.format_error_heading(result), err=True)
        typer.echo(result.path, err=True)
        if verbose and result.error:
            typer.echo(f"  {result.error}", err=True)
        return

    typer.echo(StandardMessages.FILE_READING.format(filename=filename))

    if verbose:
        _format_detection_details(result)

    if result.error:
        typer.echo(f"{StandardMessages.WARNING_ICON} {StandardMessages.format_error_heading(result)}")
        if verbose:
            typer.echo(f"  {result.error}")
    else:
        typer.echo(StandardMessages.FILE_RESIZING.format(filename=filename))
        typer.echo(StandardMessages.format_sizes(result))

    typer.echo(StandardMessages.FILE_DONE)
    typer.echo()


def _format_detection_details(result: TrimResult):
    """Header and scan details of a result"""
    header = result.header
    if header is not None:
        if header.trusted:
            typer.echo(StandardMessages.AEO_READ.format(offset=header.declared_offset))
            if header.discrepancy == 0:
                typer.echo(StandardMessages.AEO_CORRECT)
            else:
                typer.echo(StandardMessages.AEO_INCORRECT.format(
                    discrepancy=header.discrepancy, boundary=header.boundary))
                if header.wifi_hint:
                    typer.echo(StandardMessages.WIFI_HINT)
        else:
            typer.echo(StandardMessages.AEO_UNTRUSTED.format(reason=header.reason))

    scan = result.scan
    if scan is not None:
        typer.echo(StandardMessages.SCAN_FOUND.format(
            boundary=scan.boundary, reads=scan.reads, method=scan.method.value))

    if result.clamped:
        typer.echo(StandardMessages.CLAMPED)


def format_batch_summary(batch: BatchResult):
    """Total difference and failure count of the run"""
    typer.echo(StandardMessages.format_total(batch.total_difference))
    if batch.failed:
        typer.echo(
            f"{StandardMessages.WARNING_ICON} "
            f"{StandardMessages.FILES_FAILED.format(count=len(batch.failed))}",
            err=True,
        )


def format_inspection(report: InspectionReport):
    for line in StandardMessages.format_inspection(report):
        typer.echo(line)
