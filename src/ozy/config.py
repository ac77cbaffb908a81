"""Configuration models for ozy."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel

from ozy.git.hosts import DEFAULT_GIT_HOST
from ozy.ssh.config import DEFAULT_SSH_CONFIG_PATH

CONFIG_ENV_VAR = "OZY_CONFIG"
DEFAULT_CONFIG_PATH = "~/.config/ozy/config.yaml"


class SSHSettings(BaseModel):
    """SSH client settings."""

    config_path: str = DEFAULT_SSH_CONFIG_PATH
    command: str = "ssh"


class GitSettings(BaseModel):
    """Git hosting settings."""

    host: str = DEFAULT_GIT_HOST  # HostName matched by `ozy git hosts`


class OzyConfig(BaseModel):
    """Main ozy configuration."""

    ssh: SSHSettings = SSHSettings()
    git: GitSettings = GitSettings()
    verbose: bool = False


def get_config_path() -> Path:
    """Path of the settings file, honouring OZY_CONFIG."""
    return Path(os.path.expanduser(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)))


def load_config(path: Path | None = None) -> OzyConfig:
    """Load configuration from YAML file, falling back to defaults."""
    path = path or get_config_path()
    if not path.exists():
        return OzyConfig()
    with open(path) as f:
        data = yaml.safe_load(f)
    return OzyConfig(**(data or {}))


def get_config_template() -> str:
    """Get the default configuration template."""
    return """# ozy configuration

ssh:
  config_path: ~/.ssh/config  # SSH client config holding your Host entries
  command: ssh  # client used to probe the git host

git:
  host: github.com  # HostName listed by 'ozy git hosts'

verbose: false
"""
