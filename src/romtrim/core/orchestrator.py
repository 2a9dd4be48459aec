#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Trim Orchestrator - per-file boundary detection and truncation

Three strategies, chosen once from the run configuration:

1. Not paranoid: read the AEO and resize accordingly.
2. Paranoid: read the AEO, scan from the end of the file when the verified
   AEO and the file size do not match. The result is never smaller than
   the AEO.
3. Paranoid, ignoring the header: scan from the end only.

A boundary of zero means detection failed and the file is left alone. Every
error is caught here and reported through the returned :class:`TrimResult`.
"""

from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from ..common.constants import FileConstants, ScanConstants
from ..common.enums import ScanMethod, Strategy, TrimState, TrimStatus
from ..common.exceptions import DetectionFailure, OpenError, ReadError, RomTrimError, TruncateError
from ..infrastructure.logging import get_logger, log_execution_time
from ..utils.math_ops import is_power_of_two
from .bisector import ChunkedBisector
from .file_io import file_length
from .header import HeaderOffsetReader
from .models import HeaderReading, InspectionReport, RunConfig, ScanReading, TrimResult
from .tail_scanner import TailScanner

logger = get_logger("orchestrator")


class TrimOrchestrator:
    """Runs the trim state machine for one file at a time.

    Holds only immutable configuration, so one instance may serve several
    threads.
    """

    def __init__(
        self,
        config: Optional[RunConfig] = None,
        chunk_size: int = ScanConstants.CHUNK_SIZE,
        aeo_buffer: int = ScanConstants.AEO_BUFFER,
        paranoia_buffer: int = ScanConstants.PARANOIA_BUFFER,
        aeo_field_offset: int = ScanConstants.AEO_FIELD_OFFSET,
        wifi_discrepancy: int = ScanConstants.WIFI_ENABLED_GAME_ADDITIONAL_OFFSET,
    ):
        self.config = config or RunConfig()
        self.header_reader = HeaderOffsetReader(
            field_offset=aeo_field_offset,
            verify_window=aeo_buffer,
            wifi_discrepancy=wifi_discrepancy,
        )
        self.tail_scanner = TailScanner(initial_window=paranoia_buffer)
        self.bisector = ChunkedBisector(chunk_size=chunk_size)

    @property
    def strategy(self) -> Strategy:
        return self.config.strategy

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    @log_execution_time("orchestrator")
    def trim(self, path: Union[str, Path]) -> TrimResult:
        """Open ``path`` read-write, trim it in place and close it."""
        name = str(path)
        logger.info(f"Reading {Path(name).name}:")
        try:
            # A dry run never resizes, so read access is enough
            mode = "rb" if self.config.dry_run else FileConstants.OPEN_MODE
            handle = open(name, mode)
        except OSError as e:
            error = OpenError(
                f"I can't read the file at all. Check you have read and write permissions "
                f"for this file, and that it still exists: {e}",
                file_path=name,
            )
            return self._failed(name, error, TrimState.READING)

        with handle:
            return self.trim_handle(handle, name)

    def trim_handle(self, handle: BinaryIO, name: Optional[str] = None) -> TrimResult:
        """Trim through a caller-supplied seekable, truncatable binary handle.

        The handle is left open.
        """
        name = name or str(getattr(handle, "name", "<stream>"))
        state = self._transition(name, TrimState.IDLE, TrimState.READING)
        original_length = 0
        header: Optional[HeaderReading] = None
        scan: Optional[ScanReading] = None
        clamped = False

        try:
            original_length = file_length(handle)

            state = self._transition(name, state, TrimState.DETECTING)
            header, scan = self._detect(handle, original_length)

            if header is not None and scan is not None:
                state = self._transition(name, state, TrimState.CLAMPING)
            boundary, clamped = self._reconcile(header, scan)

            state = self._transition(name, state, TrimState.TRUNCATING)
            if boundary == 0 and header is not None and not header.trusted and scan is None:
                raise DetectionFailure(
                    f"The Application End Offset is untrustworthy ({header.reason}). "
                    "The file will not be touched.",
                    file_path=name,
                )
            if boundary == 0:
                raise DetectionFailure(
                    "Something has gone wrong, the last sane byte came back as zero. "
                    "The file will not be touched.",
                    file_path=name,
                )
            if boundary > original_length:
                raise DetectionFailure(
                    f"Boundary {boundary} lies beyond end of file ({original_length}). "
                    "The file will not be touched.",
                    file_path=name,
                )

            self._truncate(handle, name, original_length, boundary)
            state = self._transition(name, state, TrimState.DONE)

        except DetectionFailure as e:
            logger.warning(f"{name}: {e.message}")
            state = self._transition(name, state, TrimState.FAILED)
            return TrimResult(
                path=name,
                status=TrimStatus.UNCHANGED,
                original_length=original_length,
                new_length=original_length,
                strategy=self.strategy,
                header=header,
                scan=scan,
                dry_run=self.config.dry_run,
                state=state,
                error=e.message,
                error_code=e.error_code,
            )
        except (ReadError, TruncateError) as e:
            return self._failed(
                name, e, state, original_length=original_length, header=header, scan=scan
            )

        status = TrimStatus.TRIMMED if boundary < original_length else TrimStatus.UNCHANGED
        return TrimResult(
            path=name,
            status=status,
            original_length=original_length,
            new_length=boundary,
            strategy=self.strategy,
            header=header,
            scan=scan,
            clamped=clamped,
            dry_run=self.config.dry_run,
        )

    def inspect(self, path: Union[str, Path]) -> InspectionReport:
        """Run every detection method read-only and report their boundaries."""
        name = str(path)
        try:
            handle = open(name, "rb")
        except OSError as e:
            error = OpenError(f"Unable to open file for reading: {e}", file_path=name)
            return InspectionReport(path=name, error=error.message, error_code=error.error_code)

        with handle:
            try:
                length = file_length(handle)
                header = self.header_reader.read(handle, length)
                tail = self.tail_scanner.find_boundary(handle, length)
                bisect = self.bisector.find_boundary(handle, length)
            except ReadError as e:
                return InspectionReport(path=name, error=e.message, error_code=e.error_code)

        return InspectionReport(
            path=name,
            file_length=length,
            power_of_two=is_power_of_two(length),
            header=header,
            tail=tail,
            bisect=bisect,
        )

    # ------------------------------------------------------------------
    # State machine steps
    # ------------------------------------------------------------------

    @staticmethod
    def _transition(name: str, current: TrimState, target: TrimState) -> TrimState:
        logger.debug(f"{name}: {current.value} -> {target.value}")
        return target

    def _scan(self, handle: BinaryIO, length: int) -> ScanReading:
        logger.info("Scanning the file for dummy data...")
        if self.config.scan_method == ScanMethod.BISECT:
            return self.bisector.find_boundary(handle, length)
        return self.tail_scanner.find_boundary(handle, length)

    def _detect(
        self, handle: BinaryIO, length: int
    ) -> Tuple[Optional[HeaderReading], Optional[ScanReading]]:
        strategy = self.strategy

        if strategy == Strategy.SCAN_ONLY:
            return None, self._scan(handle, length)

        header = self.header_reader.read(handle, length)

        if strategy == Strategy.HEADER_ONLY:
            return header, None

        # Paranoid: only scan when the header does not already account for the whole file
        if header.trusted and header.boundary == length:
            return header, None

        if not is_power_of_two(length):
            logger.info(f"File size {length} is not a power of two, the header may not be authoritative")

        # The header only acts as a lower bound once the scan is done
        return header, self._scan(handle, length)

    @staticmethod
    def _reconcile(
        header: Optional[HeaderReading], scan: Optional[ScanReading]
    ) -> Tuple[int, bool]:
        """Final boundary and whether the header raised the scan result."""
        header_boundary = header.boundary if header is not None and header.trusted else None

        if scan is None:
            return (header_boundary or 0), False

        if header_boundary is not None and scan.boundary < header_boundary:
            logger.info("The AEO suggests that the ROM is larger than what the paranoia check found.")
            logger.info(f"The last sane byte has been corrected to match the AEO: {header_boundary}")
            return header_boundary, True

        return scan.boundary, False

    def _truncate(self, handle: BinaryIO, name: str, original_length: int, boundary: int) -> None:
        difference = boundary - original_length
        logger.info(
            f"Resizing {Path(name).name}: Previously: {original_length}, "
            f"Now: {boundary}, Difference: {difference}"
        )

        if self.config.dry_run or boundary == original_length:
            return

        try:
            handle.truncate(boundary)
            handle.flush()
        except (OSError, ValueError) as e:
            raise TruncateError(
                f"Unable to resize the file. Check you have write permissions for this file: {e}",
                file_path=name,
            ) from e

        try:
            resized = file_length(handle)
        except ReadError as e:
            raise TruncateError(f"Unable to verify the new file size: {e.message}", file_path=name) from e
        if resized != boundary:
            raise TruncateError(
                f"File size after resize is {resized}, expected {boundary}", file_path=name
            )

    def _failed(
        self,
        name: str,
        error: RomTrimError,
        state: TrimState,
        original_length: int = 0,
        header: Optional[HeaderReading] = None,
        scan: Optional[ScanReading] = None,
    ) -> TrimResult:
        logger.error(f"{name}: {error.message} (while {state.value})")
        self._transition(name, state, TrimState.FAILED)
        return TrimResult(
            path=name,
            status=TrimStatus.FAILED,
            original_length=original_length,
            new_length=original_length,
            strategy=self.strategy,
            header=header,
            scan=scan,
            state=TrimState.FAILED,
            dry_run=self.config.dry_run,
            error=error.message,
            error_code=error.error_code,
        )
