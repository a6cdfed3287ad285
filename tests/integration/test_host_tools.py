"""
Integration tests against real tar, gzip and git.

Each test skips when its tool is not installed.
"""

import gzip
import os
import tarfile

import pytest

from opskit.core.exceptions import DirtyWorkTreeError, PathNotFoundError
from opskit.plugins import GitClient, GzipCompressor, TarArchiveWriter
from opskit.services.backup import BackupService
from opskit.services.deploy import DeployService
from opskit.services.log_rotate import SECONDS_PER_DAY, LogRotateService

from .conftest import git, require_tool

pytestmark = pytest.mark.integration


class TestBackupWithTar:
    def test_archive_has_relative_members(self, tmp_path, real_runner, real_checker, null_logger):
        require_tool("tar")
        source = tmp_path / "project"
        (source / "src").mkdir(parents=True)
        (source / "src" / "main.py").write_text("print('hi')\n")
        dest = tmp_path / "backups" / "project.tar.gz"

        BackupService(TarArchiveWriter(real_runner), real_checker, null_logger).run(source, dest)

        with tarfile.open(dest, "r:gz") as archive:
            names = archive.getnames()
        assert "project/src/main.py" in names
        assert not any(name.startswith("/") for name in names)

    def test_missing_source_creates_nothing(self, tmp_path, real_runner, real_checker, null_logger):
        dest = tmp_path / "backups" / "x.tar.gz"
        with pytest.raises(PathNotFoundError):
            BackupService(TarArchiveWriter(real_runner), real_checker, null_logger).run(tmp_path / "nope", dest)
        assert not dest.parent.exists()


class TestLogRotateWithGzip:
    def test_only_stale_logs_compressed(self, tmp_path, real_runner, real_checker, null_logger):
        require_tool("gzip")
        stale = tmp_path / "old.log"
        stale.write_text("old entries\n")
        old = stale.stat().st_mtime - 10 * SECONDS_PER_DAY
        os.utime(stale, (old, old))
        fresh = tmp_path / "today.log"
        fresh.write_text("new entries\n")

        report = LogRotateService(GzipCompressor(real_runner), real_checker, null_logger).run(tmp_path, 7)

        assert report.compressed == [stale]
        assert not stale.exists()
        with gzip.open(tmp_path / "old.log.gz", "rt") as f:
            assert f.read() == "old entries\n"
        assert fresh.exists()


class TestDeployWithGit:
    def make_deployer(self, real_runner, real_checker, null_logger):
        return DeployService(GitClient(real_runner), [], real_runner, real_checker, null_logger)

    def test_fast_forwards_and_runs_hook(self, deploy_repos, real_runner, real_checker, null_logger):
        upstream, clone = deploy_repos
        (upstream / "app.txt").write_text("v2\n")
        hook = upstream / "deploy.sh"
        hook.write_text("#!/bin/sh\necho hook ran in $(basename \"$PWD\")\n")
        hook.chmod(0o755)
        git("add", "app.txt", "deploy.sh", cwd=upstream)
        git("commit", "-m", "v2", cwd=upstream)
        head = git("rev-parse", "HEAD", cwd=upstream).strip()

        report = self.make_deployer(real_runner, real_checker, null_logger).deploy(clone, "main")

        assert (clone / "app.txt").read_text() == "v2\n"
        assert report.commit == head
        assert report.hook_ran is True
        assert report.hook_output.strip() == "hook ran in clone"

    def test_dirty_clone_is_untouched(self, deploy_repos, real_runner, real_checker, null_logger):
        upstream, clone = deploy_repos
        (upstream / "app.txt").write_text("v2\n")
        git("commit", "-am", "v2", cwd=upstream)
        (clone / "app.txt").write_text("local edit\n")
        before = git("rev-parse", "HEAD", cwd=clone)

        with pytest.raises(DirtyWorkTreeError):
            self.make_deployer(real_runner, real_checker, null_logger).deploy(clone, "main")

        assert git("rev-parse", "HEAD", cwd=clone) == before
        assert git("rev-parse", "--verify", "--quiet", "origin/main", cwd=clone) == before
        assert (clone / "app.txt").read_text() == "local edit\n"
