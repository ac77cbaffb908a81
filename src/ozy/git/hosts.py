"""List SSH hosts that point at a git hosting service."""

from ozy.result import Err, Ok, Result
from ozy.ssh.config import DEFAULT_SSH_CONFIG_PATH, load_ssh_config
from ozy.types import HostMapping, ListHostsError

DEFAULT_GIT_HOST = "github.com"


def list_matching_hosts(hosts: HostMapping, target_hostname: str) -> list[str]:
    """Aliases whose HostName equals `target_hostname`, in config order."""
    return [alias for alias, entry in hosts.items() if entry.hostname == target_hostname]


def list_git_hosts(
    ssh_config_path: str = DEFAULT_SSH_CONFIG_PATH,
    target_hostname: str = DEFAULT_GIT_HOST,
) -> Result[list[str], ListHostsError]:
    """Load the SSH config and list aliases for the git host."""
    hosts = load_ssh_config(ssh_config_path)
    if isinstance(hosts, Err):
        return Err(
            ListHostsError.MALFORMED_SSH_CONFIG_FILE,
            f"{hosts.kind.value}: {hosts.reason}",
        )
    return Ok(list_matching_hosts(hosts.value, target_hostname))
