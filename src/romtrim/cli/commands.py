#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI Commands

- trim: detect the end of content of each ROM and truncate it in place
- inspect: report what every detection method finds, without writing
- config: show the effective configuration

Switches and paths may be interleaved, and short switches combined
(``romtrim trim game.nds -pi other.nds``).
"""

import copy
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from ..common.enums import LogLevel, ScanMethod
from ..common.exceptions import ConfigurationError, format_error_for_user
from ..config.settings import AppConfig, get_app_config
from ..core.messages import StandardMessages
from ..core.models import RunConfig
from ..infrastructure.logging import set_log_level
from ..services.batch_service import BatchTrimService, collect_candidates
from .formatters import format_batch_summary, format_inspection, format_result


def _load_app_config(config_path: Optional[Path], workers: Optional[int] = None) -> AppConfig:
    """Load and validate the configuration, applying command line overrides

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    app_config = AppConfig.load(config_path) if config_path else copy.deepcopy(get_app_config())
    if workers is not None:
        app_config.processing.max_workers = workers

    is_valid, errors = app_config.validate()
    if not is_valid:
        raise ConfigurationError("; ".join(errors), config_key=str(config_path or AppConfig.get_default_config_path()))
    return app_config


def _fail(error: ConfigurationError):
    typer.echo(f"{StandardMessages.ERROR_ICON} {format_error_for_user(error)}", err=True)
    raise typer.Exit(1)


def trim_command(
    paths: Optional[List[Path]] = typer.Argument(None, help="ROM files to trim"),
    paranoid: bool = typer.Option(False, "-p", "--paranoid", help="Scan from the end of the file when the header disagrees"),
    ignore_header: bool = typer.Option(False, "-i", "--ignore-header", help="Ignore the Application End Offset, implies -p"),
    ignore_extension: bool = typer.Option(False, "-e", "--ignore-extension", help="Accept files without the .nds extension"),
    bisect: bool = typer.Option(False, "--bisect", help="Use the chunked binary search instead of the tail scan"),
    dry_run: bool = typer.Option(False, "-n", "--dry-run", help="Report what would be trimmed without resizing"),
    keep_original: bool = typer.Option(False, "-k", "--keep-original", help="Trim a ' trimN' copy, keep the original"),
    workers: Optional[int] = typer.Option(None, "-w", "--workers", help="Files processed in parallel"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Configuration file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show header and scan details"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="One line per file"),
):
    """Trim the padding from ROM files in place"""
    if not paths:
        typer.echo(StandardMessages.USAGE)
        raise typer.Exit(1)

    try:
        app_config = _load_app_config(config_path, workers)
    except ConfigurationError as e:
        _fail(e)

    if verbose:
        set_log_level(LogLevel.INFO)

    default_method = ScanMethod(app_config.processing.default_scan_method)
    run_config = RunConfig(
        paranoid=paranoid or ignore_header,
        ignore_header=ignore_header,
        ignore_extension=ignore_extension,
        scan_method=ScanMethod.BISECT if bisect else default_method,
        dry_run=dry_run,
    )

    for line in StandardMessages.format_mode_lines(run_config):
        typer.echo(line)

    candidates = collect_candidates(paths, app_config.processing.extensions, run_config.ignore_extension)
    if not candidates:
        typer.echo(StandardMessages.NOTHING_TO_TRIM)
        raise typer.Exit(1)

    service = BatchTrimService.from_config(run_config, app_config, keep_original=keep_original)
    batch = service.run(candidates)

    for result in batch.results:
        format_result(result, verbose=verbose, quiet=quiet)
    format_batch_summary(batch)

    if not batch.success:
        raise typer.Exit(1)


def inspect_command(
    paths: List[Path] = typer.Argument(..., help="ROM files to inspect"),
    ignore_extension: bool = typer.Option(False, "-e", "--ignore-extension", help="Accept files without the .nds extension"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Configuration file"),
):
    """Compare the header, tail scan and bisect boundaries without writing"""
    try:
        app_config = _load_app_config(config_path)
    except ConfigurationError as e:
        _fail(e)

    candidates = collect_candidates(paths, app_config.processing.extensions, ignore_extension)
    if not candidates:
        typer.echo(StandardMessages.NOTHING_TO_TRIM)
        raise typer.Exit(1)

    service = BatchTrimService.from_config(RunConfig(dry_run=True), app_config)
    reports = service.inspect(candidates)
    for report in reports:
        format_inspection(report)

    if any(report.error for report in reports):
        raise typer.Exit(1)


def config_command(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Configuration file"),
    save: bool = typer.Option(False, "--save", help="Write the effective configuration back to disk"),
):
    """Display the effective configuration"""
    app_config = AppConfig.load(config_path) if config_path else get_app_config()

    typer.echo(f"{StandardMessages.INFO_ICON} Configuration ({config_path or AppConfig.get_default_config_path()}):")
    typer.echo(yaml.safe_dump(asdict(app_config), default_flow_style=False, sort_keys=False).rstrip())

    is_valid, errors = app_config.validate()
    for error in errors:
        typer.echo(f"{StandardMessages.ERROR_ICON} {error}", err=True)

    if save and is_valid:
        if app_config.save(config_path):
            typer.echo(f"{StandardMessages.SUCCESS_ICON} Configuration saved")
        else:
            typer.echo(f"{StandardMessages.ERROR_ICON} Unable to save the configuration", err=True)
            raise typer.Exit(1)

    if not is_valid:
        raise typer.Exit(1)
