"""Resolve the signing key for a remote origin from SSH client config."""

import logging
import os
from pathlib import Path

from ozy.result import Err, Ok, Result
from ozy.types import HostMapping, RemoteOrigin, ResolvedKey, SetupError

logger = logging.getLogger(__name__)

SSH_REMOTE_PREFIX = "git@"
PUBKEY_SUFFIX = ".pub"


def parse_remote_origin(url: str) -> Result[RemoteOrigin, SetupError]:
    """Parse an SSH remote of the form `git@<host>:<path>`."""
    if not url.startswith(SSH_REMOTE_PREFIX):
        return Err(
            SetupError.REMOTE_ORIGIN_IS_NOT_SSH,
            f"Remote origin '{url}' isn't an ssh-based origin",
        )
    host = url[len(SSH_REMOTE_PREFIX) :].split(":")[0]
    return Ok(RemoteOrigin(url=url, host=host))


def read_pubkey_email(pubkey_path: Path) -> Result[str, SetupError]:
    """Take the trailing comment of a public key file as the email."""
    try:
        tokens = pubkey_path.read_text().strip().split()
    except (OSError, UnicodeDecodeError) as e:
        return Err(SetupError.SSH_PUBKEY_MALFORMED, f"Unable to read {pubkey_path}: {e}")

    if not tokens:
        return Err(SetupError.SSH_PUBKEY_MALFORMED, f"No email found in file {pubkey_path}")
    return Ok(tokens[-1])


def resolve_identity(remote_url: str, hosts: HostMapping) -> Result[ResolvedKey, SetupError]:
    """Find the public key and email used for a remote origin URL."""
    origin = parse_remote_origin(remote_url)
    if isinstance(origin, Err):
        return origin
    return resolve_origin_identity(origin.value, hosts)


def resolve_origin_identity(origin: RemoteOrigin, hosts: HostMapping) -> Result[ResolvedKey, SetupError]:
    """Find the public key and email for an already parsed remote origin.

    Args:
        origin: Parsed SSH remote
        hosts: Parsed SSH client config

    Returns:
        Ok with the resolved key, or Err at the first failing step.
        A missing host lists every configured alias in `details`.

    """
    host_alias = origin.host

    if host_alias not in hosts:
        aliases = list(hosts)
        reason = "\n".join(
            [
                f"No existing ssh config entry for the origin remote host '{host_alias}'",
                "Existing Hosts are",
                *(f" - {alias}" for alias in aliases),
            ]
        )
        return Err(SetupError.SSH_CONFIG_HOST_MISSING, reason, details=aliases)

    entry = hosts[host_alias]
    if not entry.identity_file:
        return Err(
            SetupError.SSH_PUBKEY_MISSING,
            f"No IdentityFile entry found for Host '{host_alias}'",
        )

    identity_file_path = os.path.expanduser(entry.identity_file) + PUBKEY_SUFFIX
    if not Path(identity_file_path).exists():
        return Err(SetupError.SSH_PUBKEY_MISSING, f"No such file exists {identity_file_path}")

    email = read_pubkey_email(Path(identity_file_path))
    if isinstance(email, Err):
        return email

    logger.debug("Resolved %s to %s (%s)", host_alias, identity_file_path, email.value)
    return Ok(
        ResolvedKey(
            host_alias=host_alias,
            identity_file_path=identity_file_path,
            email=email.value,
        )
    )
