"""Configure the current repository for SSH-signed commits."""

import logging

from ozy.git.identity import parse_remote_origin, resolve_origin_identity
from ozy.git.repo import GitManager
from ozy.result import Err, Ok, Result
from ozy.ssh.config import DEFAULT_SSH_CONFIG_PATH, load_ssh_config
from ozy.ssh.probe import IdentityProbe
from ozy.types import GitConfigScope, SetupError, SigningIdentity, SSHConfigError

logger = logging.getLogger(__name__)


def signing_config_values(identity: SigningIdentity) -> list[tuple[str, str, GitConfigScope]]:
    """Git config values for an identity, in the order they are written."""
    return [
        ("commit.gpgsign", "true", GitConfigScope.GLOBAL),
        ("tag.gpgsign", "true", GitConfigScope.GLOBAL),
        ("gpg.format", "ssh", GitConfigScope.GLOBAL),
        ("user.signingkey", identity.identity_file_path.replace("\\", "/"), GitConfigScope.LOCAL),
        ("user.name", identity.username, GitConfigScope.LOCAL),
        ("user.email", identity.email, GitConfigScope.LOCAL),
    ]


def write_signing_config(git: GitManager, identity: SigningIdentity) -> list[str]:
    """Write every signing value, continuing past failures.

    Returns:
        Keys that could not be written

    """
    failed = []
    for key, value, scope in signing_config_values(identity):
        if isinstance(git.set_config(key, value, scope), Err):
            failed.append(key)
    return failed


def run_setup(
    git: GitManager,
    probe: IdentityProbe,
    ssh_config_path: str = DEFAULT_SSH_CONFIG_PATH,
) -> Result[SigningIdentity, SetupError]:
    """Resolve the signing identity for the repository and write git config.

    Each step must pass before the next one runs: inside a work tree,
    origin configured, origin over SSH, SSH config loads, host present,
    public key readable, username confirmed by the remote.

    Individual write failures are logged but do not turn the result into
    a failure once the write stage is reached.
    """
    if not git.is_inside_work_tree():
        return Err(SetupError.NOT_IN_GIT_DIRECTORY, "Current directory is not a Git repository.")

    remote_url = git.get_remote_url()
    if not remote_url:
        return Err(SetupError.NO_REMOTE_ORIGIN, "No remote origin configured.")

    origin = parse_remote_origin(remote_url)
    if isinstance(origin, Err):
        return origin

    hosts = load_ssh_config(ssh_config_path)
    if isinstance(hosts, Err):
        kind = (
            SetupError.SSH_CONFIG_FILE_MISSING
            if hosts.kind == SSHConfigError.CONFIG_FILE_MISSING
            else SetupError.SSH_CONFIG_FILE_MALFORMED
        )
        return Err(kind, f"{hosts.kind.value}: {hosts.reason}")

    resolved = resolve_origin_identity(origin.value, hosts.value)
    if isinstance(resolved, Err):
        return resolved
    key = resolved.value

    username = probe.probe(key.host_alias)
    if not username:
        return Err(
            SetupError.SSH_PUBKEY_NOT_ATTACHED_TO_USER,
            f"Could not determine username. Check if pubkey at {key.identity_file_path} "
            "is saved in github as an AuthN key",
        )

    identity = SigningIdentity(
        identity_file_path=key.identity_file_path,
        email=key.email,
        username=username,
    )

    failed = write_signing_config(git, identity)
    if failed:
        logger.warning("Some git config values were not written: %s", ", ".join(failed))

    return Ok(identity)
