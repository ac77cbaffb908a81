"""Shared fixtures."""

import subprocess
from pathlib import Path

import pytest

SSH_CONFIG = """\
# personal and work accounts
Host work
  HostName github.com
  User git
  IdentityFile {key_dir}/id_work
  IdentitiesOnly yes

Host personal
  HostName github.com
  User git
  IdentityFile {key_dir}/id_personal
  AddKeysToAgent yes

Host lab
  HostName git.example.org
  User git
"""


@pytest.fixture
def git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate git from the user's global and system config."""
    global_config = tmp_path / "gitconfig"
    global_config.touch()
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return global_config


@pytest.fixture
def git_repo(tmp_path: Path, git_env: Path) -> Path:
    """An empty repository with an SSH origin."""
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", "-q"], cwd=repo, check=True)
    subprocess.run(
        ["git", "remote", "add", "origin", "git@work:org/repo.git"],
        cwd=repo,
        check=True,
    )
    return repo


@pytest.fixture
def key_dir(tmp_path: Path) -> Path:
    """Directory holding public keys for the sample SSH config."""
    keys = tmp_path / "keys"
    keys.mkdir()
    (keys / "id_work.pub").write_text("ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIWork  alice@example.com\n")
    (keys / "id_personal.pub").write_text("ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIHome alice@home.net\n")
    return keys


@pytest.fixture
def ssh_config_file(tmp_path: Path, key_dir: Path) -> Path:
    """SSH client config pointing at the keys in `key_dir`."""
    path = tmp_path / "ssh_config"
    path.write_text(SSH_CONFIG.format(key_dir=key_dir))
    return path


def git_config_get(repo: Path, scope: str, key: str) -> str | None:
    """Read a git config value, or None when unset."""
    result = subprocess.run(
        ["git", "config", f"--{scope}", "--get", key],
        cwd=repo,
        capture_output=True,
        text=True,
        check=False,
    )
    return result.stdout.strip() if result.returncode == 0 else None
