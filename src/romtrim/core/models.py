from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..common.enums import ScanMethod, Strategy, TrimState, TrimStatus


class RunConfig(BaseModel):
    """Switches decided once per invocation. Never mutated afterwards."""

    paranoid: bool = Field(False, description="Scan from end of file when the header disagrees")
    ignore_header: bool = Field(False, description="Do not read the AEO at all, implies paranoid")
    ignore_extension: bool = Field(False, description="Accept files without the ROM extension")
    scan_method: ScanMethod = Field(ScanMethod.TAIL, description="Scanner used in paranoid mode")
    dry_run: bool = Field(False, description="Detect only, never resize")

    class Config:
        frozen = True

    @property
    def strategy(self) -> Strategy:
        if self.ignore_header:
            return Strategy.SCAN_ONLY
        if self.paranoid:
            return Strategy.HEADER_WITH_FALLBACK
        return Strategy.HEADER_ONLY


class HeaderReading(BaseModel):
    """Application End Offset as read from the header and verified."""

    declared_offset: int = Field(..., ge=0, description="Raw value of the header field")
    boundary: int = Field(0, ge=0, description="Verified end of content")
    discrepancy: int = Field(0, ge=0, description="Bytes of content found past the declared offset")
    trusted: bool = Field(True, description="False when the field is unreadable or points past EOF")
    wifi_hint: bool = Field(False, description="Discrepancy matches the wi-fi enabled game case")
    reason: Optional[str] = Field(None, description="Why the header is not trusted")

    class Config:
        frozen = True

    @property
    def is_exact(self) -> bool:
        return self.trusted and self.discrepancy == 0


class ScanReading(BaseModel):
    """Result of a tail scan or bisection."""

    method: ScanMethod
    boundary: int = Field(0, ge=0, description="Absolute boundary, 0 when nothing sane was found")
    reads: int = Field(0, ge=0, description="Number of windows or chunks read")
    lower_bound: int = Field(0, ge=0, description="Lowest offset the scan was allowed to reach")

    class Config:
        frozen = True


class TrimResult(BaseModel):
    """Outcome of one file's trim, used for reporting."""

    path: str = Field(..., description="File that was processed")
    status: TrimStatus = Field(..., description="Trimmed, left unchanged or failed")
    original_length: int = Field(0, ge=0)
    new_length: int = Field(0, ge=0)
    strategy: Optional[Strategy] = None
    header: Optional[HeaderReading] = None
    scan: Optional[ScanReading] = None
    clamped: bool = Field(False, description="Header offset raised the scan result")
    state: TrimState = Field(TrimState.DONE, description="State the trim ended in")
    dry_run: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None

    class Config:
        frozen = True

    @property
    def difference(self) -> int:
        return self.new_length - self.original_length

    @property
    def success(self) -> bool:
        return self.status != TrimStatus.FAILED


class InspectionReport(BaseModel):
    """Read-only cross-check of every detection method on one file."""

    path: str
    file_length: int = Field(0, ge=0)
    power_of_two: bool = False
    header: Optional[HeaderReading] = None
    tail: Optional[ScanReading] = None
    bisect: Optional[ScanReading] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    class Config:
        frozen = True

    @property
    def agree(self) -> bool:
        """True when every available, trusted method found the same boundary."""
        boundaries = set()
        if self.header is not None and self.header.trusted:
            boundaries.add(self.header.boundary)
        for scan in (self.tail, self.bisect):
            if scan is not None:
                boundaries.add(scan.boundary)
        return len(boundaries) == 1
