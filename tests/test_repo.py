"""Tests for GitManager."""

from pathlib import Path

import pytest

from conftest import git_config_get
from ozy.git.repo import GitConfig, GitManager
from ozy.result import Err, Ok
from ozy.types import GitConfigScope


class TestGitManager:
    def test_inside_work_tree(self, git_repo: Path):
        assert GitManager(GitConfig(repo_path=git_repo)).is_inside_work_tree() is True

    def test_outside_work_tree(self, tmp_path: Path, git_env: Path):
        plain = tmp_path / "plain"
        plain.mkdir()
        assert GitManager(GitConfig(repo_path=plain)).is_inside_work_tree() is False

    def test_remote_url(self, git_repo: Path):
        git = GitManager(GitConfig(repo_path=git_repo))
        assert git.get_remote_url() == "git@work:org/repo.git"

    def test_remote_url_unset(self, git_repo: Path):
        git = GitManager(GitConfig(repo_path=git_repo, remote="upstream"))
        assert git.get_remote_url() is None

    def test_set_local_and_global(self, git_repo: Path, git_env: Path, caplog: pytest.LogCaptureFixture):
        caplog.set_level("INFO")
        git = GitManager(GitConfig(repo_path=git_repo))

        assert isinstance(git.set_config("user.name", "bob", GitConfigScope.LOCAL), Ok)
        assert isinstance(git.set_config("gpg.format", "ssh", GitConfigScope.GLOBAL), Ok)

        assert git_config_get(git_repo, "local", "user.name") == "bob"
        assert git_config_get(git_repo, "global", "gpg.format") == "ssh"
        assert any(" (local) user.name=bob" in record.message for record in caplog.records)
        assert any("(global) gpg.format=ssh" in record.message for record in caplog.records)

    def test_set_invalid_key(self, git_repo: Path):
        git = GitManager(GitConfig(repo_path=git_repo))
        result = git.set_config("nosection", "value", GitConfigScope.LOCAL)
        assert isinstance(result, Err)
        assert result.kind == "nosection"
        assert 'unable to set git config key of "nosection"' in result.reason
