"""Git repository setup for verified commits."""

from ozy.git.hosts import list_git_hosts, list_matching_hosts
from ozy.git.identity import parse_remote_origin, resolve_identity, resolve_origin_identity
from ozy.git.repo import GitConfig, GitManager
from ozy.git.setup import run_setup, write_signing_config

__all__ = [
    "GitConfig",
    "GitManager",
    "list_git_hosts",
    "list_matching_hosts",
    "parse_remote_origin",
    "resolve_identity",
    "resolve_origin_identity",
    "run_setup",
    "write_signing_config",
]
