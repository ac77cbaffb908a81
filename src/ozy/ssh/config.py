"""SSH client config parsing utilities."""

import json
import logging
import os
from pathlib import Path

from paramiko.config import SSHConfig
from paramiko.ssh_exception import ConfigParseError
from pydantic import ValidationError

from ozy.result import Err, Ok, Result
from ozy.types import HostEntry, HostMapping, SSHConfigError

logger = logging.getLogger(__name__)

DEFAULT_SSH_CONFIG_PATH = "~/.ssh/config"


def _describe_match(matches: list[dict]) -> str:
    """Rebuild the criteria of a `Match` line for error messages."""
    parts = []
    for criterion in matches:
        prefix = "!" if criterion.get("negate") else ""
        parts.append(f"{prefix}{criterion['type']}")
        if criterion.get("param") is not None:
            parts.append(str(criterion["param"]))
    return " ".join(parts)


def _collect_values(
    alias: str, config: dict, source: str
) -> dict[str, str] | Err[SSHConfigError]:
    """Flatten one block's key/values, rejecting non-string values."""
    values: dict[str, str] = {}
    for key, value in config.items():
        # paramiko keeps repeatable keywords as lists; the first one wins, as in OpenSSH
        if isinstance(value, list) and value:
            value = value[0]
        if not isinstance(value, str):
            return Err(
                SSHConfigError.MALFORMED_ENTRY,
                f"ssh file '{source}' at Host '{alias}' at key '{key}' "
                f"has non string value '{value}'",
            )
        values[key] = value
    return values


def parse_ssh_config(text: str, source: str = "<string>") -> Result[HostMapping, SSHConfigError]:
    """Parse SSH client config text into a mapping of host alias to entry.

    Every top-level line must be a `Host <alias>` declaration with a single
    alias that has not been seen before, and every block must carry a
    HostName and a User. Parsing stops at the first problem; no partial
    mapping is returned.

    Args:
        text: Full contents of the config file
        source: Name used in error messages

    Returns:
        Ok with the host mapping, or Err describing the first problem

    """
    try:
        config = SSHConfig.from_text(text)
    except ConfigParseError as e:
        return Err(SSHConfigError.PARSE_FAILURE, f"unable to parse ssh file {source}\n{e}")

    hosts: HostMapping = {}
    # paramiko always opens with an implicit block for lines before the first Host
    implicit, *entries = config._config
    if implicit["config"]:
        key, value = next(iter(implicit["config"].items()))
        return Err(
            SSHConfigError.NOT_A_HOST_ENTRY,
            f"Unexpected top-level entry in ssh file '{source}': {key}={json.dumps(value)}",
        )

    for entry in entries:
        if "host" not in entry:
            criteria = _describe_match(entry.get("matches", []))
            return Err(
                SSHConfigError.NOT_A_HOST_ENTRY,
                f"Unexpected top-level entry in ssh file '{source}': "
                f"match={json.dumps(criteria)}",
            )

        patterns = entry["host"]
        if len(patterns) != 1:
            return Err(
                SSHConfigError.NOT_A_HOST_ENTRY,
                f"top-level Host in ssh file '{source}' has value of non string "
                f"'{json.dumps(patterns)}'",
            )
        alias = patterns[0]

        if alias in hosts:
            return Err(
                SSHConfigError.DUPLICATE_HOST,
                f"ssh file '{source}' contains duplicate Hosts named '{alias}'",
            )

        values = _collect_values(alias, entry["config"], source)
        if isinstance(values, Err):
            return values

        try:
            hosts[alias] = HostEntry.model_validate(values)
        except ValidationError as e:
            return Err(
                SSHConfigError.MALFORMED_ENTRY,
                f"malformed section at Host '{alias}' due to {e}",
            )

    logger.debug("Parsed %d hosts from %s", len(hosts), source)
    return Ok(hosts)


def load_ssh_config(path: str | Path = DEFAULT_SSH_CONFIG_PATH) -> Result[HostMapping, SSHConfigError]:
    """Read and parse the SSH client config at `path`.

    The file is read on every call; nothing is cached.
    """
    config_path = Path(os.path.expanduser(str(path)))

    if not config_path.exists():
        return Err(SSHConfigError.CONFIG_FILE_MISSING, f"No file found at {config_path}")

    try:
        text = config_path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        return Err(SSHConfigError.PARSE_FAILURE, f"unable to parse ssh file {config_path}\n{e}")

    return parse_ssh_config(text, source=str(config_path))
