"""Remote identity probing over SSH."""

import logging
import subprocess
from typing import Protocol

logger = logging.getLogger(__name__)

UNRESOLVED_HOST_PREFIX = "ssh: Could not resolve"
GREETING_PREFIX = "Hi "


class IdentityProbe(Protocol):
    """Protocol for discovering which account a host alias authenticates as."""

    def probe(self, host_alias: str) -> str | None:
        """Return the remote username, or None if it cannot be determined."""
        ...


def parse_greeting(output: str) -> str | None:
    """Extract the username from a git host's SSH greeting banner.

    Git hosts answer `ssh -T` with a line such as
    "Hi bob! You've successfully authenticated, but GitHub does not
    provide shell access." Anything else yields None.
    """
    output = output.strip()

    if output.startswith(UNRESOLVED_HOST_PREFIX):
        logger.warning(output)
        return None

    if output.startswith(GREETING_PREFIX):
        name = output[len(GREETING_PREFIX) :].split("!")[0]
        return name or None

    logger.warning("Unable to discern ssh -T output format")
    logger.warning(output)
    return None


class SSHProbe:
    """Probe a host alias with the local `ssh` client."""

    def __init__(self, ssh_command: str = "ssh"):
        self.ssh_command = ssh_command

    def _run(self, host_alias: str) -> str:
        """Run `ssh -T` against the alias and return combined output."""
        result = subprocess.run(
            [self.ssh_command, "-T", host_alias],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
        logger.debug("%s -T %s exited with %d", self.ssh_command, host_alias, result.returncode)
        return result.stdout

    def probe(self, host_alias: str) -> str | None:
        try:
            output = self._run(host_alias)
        except OSError:
            logger.exception("Unable to get username for host %s", host_alias)
            return None
        return parse_greeting(output)
