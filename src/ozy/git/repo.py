"""Local git operations."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from ozy.result import Err, Ok, Result
from ozy.types import GitConfigScope

logger = logging.getLogger(__name__)

SCOPE_PREFIX = {
    GitConfigScope.LOCAL: " (local)",
    GitConfigScope.GLOBAL: "(global)",
}


@dataclass
class GitConfig:
    """Git configuration."""

    repo_path: Path = Path(".")
    remote: str = "origin"


class GitManager:
    """Local git operations."""

    def __init__(self, config: GitConfig | None = None):
        self.config = config or GitConfig()

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        """Run git command."""
        cmd = ["git", "-C", str(self.config.repo_path)] + list(args)
        return subprocess.run(cmd, capture_output=True, text=True, check=check)

    def is_inside_work_tree(self) -> bool:
        """Check if the repo path is inside a git working tree."""
        try:
            result = self._run("rev-parse", "--is-inside-work-tree", check=False)
        except OSError:
            logger.exception("Unable to run git")
            return False
        if result.returncode != 0:
            logger.debug(result.stderr.strip())
            return False
        return result.stdout.strip() == "true"

    def get_remote_url(self) -> str | None:
        """Get the configured remote URL, or None if unset."""
        try:
            result = self._run("config", "--get", f"remote.{self.config.remote}.url", check=False)
        except OSError:
            logger.exception("Unable to run git")
            return None
        url = result.stdout.strip()
        if result.returncode != 0 or not url:
            return None
        return url

    def set_config(self, key: str, value: str, scope: GitConfigScope) -> Result[None, str]:
        """Write a single git config value to the given store."""
        try:
            self._run("config", f"--{scope.value}", key, value)
        except (OSError, subprocess.CalledProcessError) as e:
            detail = e.stderr.strip() if isinstance(e, subprocess.CalledProcessError) else str(e)
            reason = f'unable to set git config key of "{key}" to "{value}" due to\n{detail}'
            logger.error(reason)
            return Err(key, reason)

        logger.info("%s %s=%s", SCOPE_PREFIX[scope], key, value)
        return Ok(None)
