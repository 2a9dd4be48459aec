"""
Batch trim service
Turns a list of candidate paths into per-file trim results and a total
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel, Field

from romtrim.common.constants import FileConstants, ProcessingConstants
from romtrim.common.enums import TrimStatus
from romtrim.common.exceptions import FileError
from romtrim.config.settings import AppConfig
from romtrim.core.models import InspectionReport, RunConfig, TrimResult
from romtrim.core.orchestrator import TrimOrchestrator
from romtrim.infrastructure.logging import get_logger, log_exception
from romtrim.utils.file_ops import choose_new_file_name, copy_file_safely, has_extension

logger = get_logger("BatchService")


class BatchResult(BaseModel):
    """Results of a whole run, in candidate order"""

    results: List[TrimResult] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def total_difference(self) -> int:
        return sum(result.difference for result in self.results)

    @property
    def failed(self) -> List[TrimResult]:
        return [result for result in self.results if result.status == TrimStatus.FAILED]

    @property
    def success(self) -> bool:
        return not self.failed


def collect_candidates(
    paths: Iterable[Union[str, Path]],
    extensions: Sequence[str] = (FileConstants.DS_ROM_EXTENSION,),
    ignore_extension: bool = False,
) -> List[Path]:
    """Existing files that pass the extension filter, each at most once.

    Rejected arguments are dropped silently. Duplicates are detected on the
    resolved path; first-seen order is kept.
    """
    candidates = {}
    for raw in paths:
        path = Path(raw)
        if not ignore_extension and not has_extension(path, extensions):
            logger.debug(f"Skipping {path}: extension not in {list(extensions)}")
            continue
        if not path.is_file():
            logger.debug(f"Skipping {path}: not an existing file")
            continue
        candidates.setdefault(path.resolve(), path)
    return list(candidates.values())


class BatchTrimService:
    """Trims many files, optionally on a thread pool"""

    def __init__(
        self,
        orchestrator: TrimOrchestrator,
        max_workers: int = ProcessingConstants.DEFAULT_MAX_WORKERS,
        keep_original: bool = False,
    ):
        self.orchestrator = orchestrator
        self.max_workers = max(1, max_workers)
        self.keep_original = keep_original

    @classmethod
    def from_config(
        cls, run_config: RunConfig, app_config: Optional[AppConfig] = None, keep_original: bool = False
    ) -> "BatchTrimService":
        app_config = app_config or AppConfig.default()
        orchestrator = TrimOrchestrator(run_config, **app_config.get_scan_config())
        return cls(orchestrator, max_workers=app_config.processing.max_workers, keep_original=keep_original)

    def _trim_one(self, path: Path) -> TrimResult:
        target = path
        if self.keep_original and not self.orchestrator.config.dry_run:
            try:
                target = choose_new_file_name(path)
                copy_file_safely(path, target)
                logger.info(f"Trimming a copy of {path}: {target}")
            except FileError as e:
                log_exception(e, "BatchService", context={"path": str(path)})
                return TrimResult(
                    path=str(path),
                    status=TrimStatus.FAILED,
                    strategy=self.orchestrator.strategy,
                    error=e.message,
                    error_code=e.error_code,
                )
        return self.orchestrator.trim(target)

    def run(self, paths: Sequence[Path]) -> BatchResult:
        """Trim every path. One file failing never stops the others."""
        if self.max_workers == 1 or len(paths) <= 1:
            results = [self._trim_one(path) for path in paths]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # map keeps candidate order; the total is summed afterwards
                results = list(executor.map(self._trim_one, paths))

        batch = BatchResult(results=results)
        logger.info(f"Trimmed {len(results)} file(s), total difference {batch.total_difference}")
        return batch

    def inspect(self, paths: Sequence[Path]) -> List[InspectionReport]:
        return [self.orchestrator.inspect(path) for path in paths]
