"""
Unit tests for log rotation.

Tests verify:
- Only regular *.log files older than the cutoff are compressed
- Existing .gz files and fresh logs are left alone
- Per-file failures are reported without stopping the batch
"""

import os
import time

import pytest

from opskit.core.exceptions import MissingDependencyError, PathNotFoundError
from opskit.services.log_rotate import SECONDS_PER_DAY, LogRotateService
from opskit.services.preconditions import PreconditionChecker

from ..fakes import FakeCompressor, FakeLocator

NOW = 1_700_000_000.0


def write_log(path, age_days, content="line\n"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    mtime = NOW - age_days * SECONDS_PER_DAY
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def log_dir(tmp_path):
    root = tmp_path / "logs"
    write_log(root / "old.log", 10)
    write_log(root / "fresh.log", 1)
    write_log(root / "app" / "nested-old.log", 30)
    write_log(root / "archived.log.gz", 40)
    write_log(root / "notes.txt", 40)
    return root


def make_service(compressor, checker, logger):
    return LogRotateService(compressor, checker, logger, clock=lambda: NOW)


class TestLogRotate:
    def test_compresses_only_stale_logs(self, log_dir, checker, logger):
        compressor = FakeCompressor()
        report = make_service(compressor, checker, logger).run(log_dir, 7)

        assert sorted(p.name for p in report.compressed) == ["nested-old.log", "old.log"]
        assert (log_dir / "old.log.gz").exists()
        assert (log_dir / "app" / "nested-old.log.gz").exists()
        assert (log_dir / "fresh.log").exists()
        assert (log_dir / "archived.log.gz").exists()
        assert (log_dir / "notes.txt").exists()
        assert report.failed == []

    def test_zero_days_includes_fresh_logs(self, log_dir, checker, logger):
        report = make_service(FakeCompressor(), checker, logger).run(log_dir, 0)
        assert "fresh.log" in {p.name for p in report.compressed}

    def test_failure_does_not_stop_batch(self, log_dir, checker, logger):
        compressor = FakeCompressor(fail_names={"old.log"})
        report = make_service(compressor, checker, logger).run(log_dir, 7)

        assert [p.name for p in report.compressed] == ["nested-old.log"]
        assert len(report.failed) == 1
        assert report.failed[0].path.name == "old.log"
        assert "Permission denied" in report.failed[0].error
        assert report.summary() == "Compressed 1 file(s), 1 failed, 0 skipped"
        assert any("old.log" in m for m in logger.messages("error"))

    def test_existing_gz_target_is_skipped(self, log_dir, checker, logger):
        write_log(log_dir / "old.log.gz", 9)
        compressor = FakeCompressor()
        report = make_service(compressor, checker, logger).run(log_dir, 7)

        assert [p.name for p in report.skipped] == ["old.log"]
        assert (log_dir / "old.log").exists()
        assert log_dir / "old.log" not in compressor.calls

    def test_symlinked_log_is_ignored(self, tmp_path, log_dir, checker, logger):
        target = write_log(tmp_path / "elsewhere.log", 50)
        (log_dir / "link.log").symlink_to(target)

        report = make_service(FakeCompressor(), checker, logger).run(log_dir, 7)

        assert "link.log" not in {p.name for p in report.compressed}
        assert target.exists()

    def test_missing_directory(self, tmp_path, checker, logger):
        with pytest.raises(PathNotFoundError):
            make_service(FakeCompressor(), checker, logger).run(tmp_path / "nope", 7)

    def test_requires_gzip(self, log_dir, logger):
        checker = PreconditionChecker(FakeLocator(tools={"tar"}), logger)
        compressor = FakeCompressor()
        with pytest.raises(MissingDependencyError, match="gzip"):
            make_service(compressor, checker, logger).run(log_dir, 7)
        assert compressor.calls == []

    def test_default_clock_is_wall_time(self, tmp_path, checker, logger):
        write_log(tmp_path / "x.log", 0)
        os.utime(tmp_path / "x.log", (time.time() - 8 * SECONDS_PER_DAY,) * 2)
        report = LogRotateService(FakeCompressor(), checker, logger).run(tmp_path, 7)
        assert [p.name for p in report.compressed] == ["x.log"]
