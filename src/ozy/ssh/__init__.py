"""SSH client config parsing and remote identity probing."""

from ozy.ssh.config import DEFAULT_SSH_CONFIG_PATH, load_ssh_config, parse_ssh_config
from ozy.ssh.probe import IdentityProbe, SSHProbe, parse_greeting

__all__ = [
    "DEFAULT_SSH_CONFIG_PATH",
    "IdentityProbe",
    "SSHProbe",
    "load_ssh_config",
    "parse_greeting",
    "parse_ssh_config",
]
