"""
Batch service tests
"""

from pathlib import Path

import pytest

from romtrim.common.enums import TrimStatus
from romtrim.config.settings import AppConfig
from romtrim.core.models import RunConfig, TrimResult
from romtrim.core.orchestrator import TrimOrchestrator
from romtrim.services.batch_service import BatchResult, BatchTrimService, collect_candidates


@pytest.mark.unit
class TestCollectCandidates:
    """Candidate filtering and de-duplication"""

    def test_extension_filter(self, rom_file):
        rom = rom_file("game.nds", content_length=300, total_length=512)
        other = rom_file("notes.txt", content_length=300, total_length=512)

        assert collect_candidates([rom, other]) == [rom]
        assert collect_candidates([rom, other], ignore_extension=True) == [rom, other]

    def test_extension_is_case_insensitive(self, rom_file):
        rom = rom_file("GAME.NDS", content_length=300, total_length=512)
        assert collect_candidates([rom]) == [rom]

    def test_missing_files_and_directories_are_dropped(self, temp_dir, rom_file):
        rom = rom_file(content_length=300, total_length=512)
        folder = temp_dir / "folder.nds"
        folder.mkdir()

        candidates = collect_candidates([temp_dir / "missing.nds", folder, rom])
        assert candidates == [rom]

    def test_duplicates_processed_once_in_first_seen_order(self, temp_dir, rom_file):
        first = rom_file("b.nds", content_length=300, total_length=512)
        second = rom_file("a.nds", content_length=300, total_length=512)
        alias = temp_dir / "." / "b.nds"

        assert collect_candidates([first, second, alias, str(second)]) == [first, second]


@pytest.mark.unit
class TestBatchResult:
    """Aggregation of per-file results"""

    def test_total_difference_and_failures(self):
        results = [
            TrimResult(path="a.nds", status=TrimStatus.TRIMMED, original_length=100, new_length=64),
            TrimResult(path="b.nds", status=TrimStatus.UNCHANGED, original_length=50, new_length=50),
            TrimResult(path="c.nds", status=TrimStatus.FAILED, original_length=10, new_length=10),
        ]
        batch = BatchResult(results=results)

        assert batch.total_difference == -36
        assert [result.path for result in batch.failed] == ["c.nds"]
        assert not batch.success

    def test_empty_batch(self):
        batch = BatchResult()
        assert batch.total_difference == 0
        assert batch.success


@pytest.mark.unit
class TestBatchTrimService:
    """Sequential and threaded runs"""

    def _make_roms(self, rom_file, count=6):
        return [
            rom_file(f"rom{i}.nds", content_length=1000 + i * 100, total_length=8192, aeo=1000 + i * 100)
            for i in range(count)
        ]

    @pytest.mark.parametrize("workers", [1, 4])
    def test_total_difference(self, rom_file, workers):
        paths = self._make_roms(rom_file)
        service = BatchTrimService(TrimOrchestrator(), max_workers=workers)

        batch = service.run(paths)

        expected = sum((1000 + i * 100) - 8192 for i in range(6))
        assert batch.total_difference == expected
        assert [result.path for result in batch.results] == [str(path) for path in paths]
        assert batch.success

    def test_one_failure_does_not_stop_the_others(self, temp_dir, rom_file):
        good = rom_file(content_length=1000, total_length=4096, aeo=1000)
        missing = temp_dir / "gone.nds"

        batch = BatchTrimService(TrimOrchestrator()).run([missing, good])

        assert batch.results[0].status == TrimStatus.FAILED
        assert batch.results[1].status == TrimStatus.TRIMMED
        assert good.stat().st_size == 1000

    def test_keep_original(self, temp_dir, rom_file):
        path = rom_file("game.nds", content_length=1000, total_length=4096, aeo=1000)
        service = BatchTrimService(TrimOrchestrator(), keep_original=True)

        batch = service.run([path])

        copy = temp_dir / "game trim0.nds"
        assert Path(batch.results[0].path).name == copy.name
        assert copy.stat().st_size == 1000
        assert path.stat().st_size == 4096

    def test_from_config(self):
        app_config = AppConfig.default()
        app_config.processing.max_workers = 3
        app_config.scan.chunk_size = 1024

        service = BatchTrimService.from_config(RunConfig(paranoid=True), app_config)

        assert service.max_workers == 3
        assert service.orchestrator.bisector.chunk_size == 1024
        assert service.orchestrator.config.paranoid

    def test_inspect(self, rom_file):
        path = rom_file(content_length=1000, total_length=4096, aeo=1000)
        reports = BatchTrimService(TrimOrchestrator()).inspect([path])

        assert len(reports) == 1
        assert reports[0].agree
        assert path.stat().st_size == 4096
