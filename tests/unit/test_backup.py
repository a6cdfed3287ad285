"""
Unit tests for the backup handler.

Tests verify:
- A missing source fails before tar is checked or anything is created
- Destination parents are created
- A failed archive leaves no partial destination behind
"""

import pytest

from opskit.core.exceptions import (
    ExternalToolError,
    InvalidArgumentError,
    MissingDependencyError,
    PathNotFoundError,
)
from opskit.services.backup import BackupService
from opskit.services.preconditions import PreconditionChecker

from ..fakes import FakeArchiveWriter, FakeLocator


@pytest.fixture
def source(tmp_path):
    src = tmp_path / "project"
    src.mkdir()
    (src / "main.py").write_text("print('hi')\n")
    return src


class TestBackup:
    def test_creates_archive_and_parents(self, tmp_path, source, checker, logger):
        archiver = FakeArchiveWriter()
        dest = tmp_path / "backups" / "nested" / "project.tar.gz"

        result = BackupService(archiver, checker, logger).run(source, dest)

        assert result == dest.resolve()
        assert dest.read_bytes() == b"archive"
        assert archiver.calls == [(source.resolve(), dest.resolve())]

    def test_missing_source_creates_nothing(self, tmp_path, logger):
        archiver = FakeArchiveWriter()
        locator = FakeLocator(tools=())
        dest = tmp_path / "out" / "backup.tar.gz"

        with pytest.raises(PathNotFoundError) as exc_info:
            BackupService(archiver, PreconditionChecker(locator, logger), logger).run(tmp_path / "missing", dest)

        assert exc_info.value.exit_code == 4
        assert archiver.calls == []
        assert not dest.parent.exists()

    def test_missing_tar(self, tmp_path, source, logger):
        archiver = FakeArchiveWriter()
        dest = tmp_path / "out" / "backup.tar.gz"

        with pytest.raises(MissingDependencyError, match="tar"):
            BackupService(archiver, PreconditionChecker(FakeLocator(tools=()), logger), logger).run(source, dest)

        assert archiver.calls == []
        assert not dest.parent.exists()

    def test_failed_archive_is_removed(self, tmp_path, source, checker, logger):
        archiver = FakeArchiveWriter(fail_with="tar: project: Cannot open: Permission denied")
        dest = tmp_path / "backup.tar.gz"

        with pytest.raises(ExternalToolError, match="Permission denied"):
            BackupService(archiver, checker, logger).run(source, dest)

        assert not dest.exists()
        assert any("removed partial archive" in m for m in logger.messages("info"))

    def test_destination_inside_source_rejected(self, source, checker, logger):
        archiver = FakeArchiveWriter()
        with pytest.raises(InvalidArgumentError, match="inside the source"):
            BackupService(archiver, checker, logger).run(source, source / "self.tar.gz")
        assert archiver.calls == []

    def test_destination_directory_rejected(self, tmp_path, source, checker, logger):
        with pytest.raises(InvalidArgumentError, match="is a directory"):
            BackupService(FakeArchiveWriter(), checker, logger).run(source, tmp_path)

    def test_single_file_source(self, tmp_path, source, checker, logger):
        archiver = FakeArchiveWriter()
        dest = tmp_path / "main.tar.gz"
        BackupService(archiver, checker, logger).run(source / "main.py", dest)
        assert archiver.calls[0][0].name == "main.py"
