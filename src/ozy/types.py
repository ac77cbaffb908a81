"""Core type definitions for ozy."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SSHConfigError(str, Enum):
    """Reasons an SSH client config could not be loaded."""

    CONFIG_FILE_MISSING = "ConfigFileMissing"
    PARSE_FAILURE = "ParseFailure"
    DUPLICATE_HOST = "DuplicateHost"
    NOT_A_HOST_ENTRY = "NotAHostEntry"
    MALFORMED_ENTRY = "MalformedEntry"


class SetupError(str, Enum):
    """Reasons `ozy git setup` stopped before writing config."""

    NOT_IN_GIT_DIRECTORY = "NotInGitDirectory"
    NO_REMOTE_ORIGIN = "NoRemoteOrigin"
    REMOTE_ORIGIN_IS_NOT_SSH = "RemoteOriginIsNotSSH"
    SSH_CONFIG_FILE_MISSING = "SSHConfigFileMissing"
    SSH_CONFIG_FILE_MALFORMED = "SSHConfigFileMalformed"
    SSH_CONFIG_HOST_MISSING = "SSHConfigHostMissing"
    SSH_PUBKEY_MISSING = "SSHPubkeyMissing"
    SSH_PUBKEY_MALFORMED = "SSHPubkeyMalformed"
    SSH_PUBKEY_NOT_ATTACHED_TO_USER = "SSHPubkeyNotAttachedToUser"


class ListHostsError(str, Enum):
    """Reasons `ozy git hosts` could not list hosts."""

    MALFORMED_SSH_CONFIG_FILE = "MalformedSSHConfigFile"


class GitConfigScope(str, Enum):
    """Git config store a value is written to."""

    LOCAL = "local"
    GLOBAL = "global"


class HostEntry(BaseModel):
    """One `Host` block of an SSH client config.

    Field aliases are the lowercased OpenSSH keywords.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    hostname: str
    user: str
    identity_file: str | None = Field(default=None, alias="identityfile")
    add_keys_to_agent: str | None = Field(default=None, alias="addkeystoagent")
    identities_only: str | None = Field(default=None, alias="identitiesonly")


HostMapping = dict[str, HostEntry]


class RemoteOrigin(BaseModel):
    """SSH-style remote URL (`git@<host>:<path>`)."""

    url: str
    host: str


class ResolvedKey(BaseModel):
    """Public key located for a host alias, before remote verification."""

    host_alias: str
    identity_file_path: str
    email: str


class SigningIdentity(BaseModel):
    """Values written into git config to sign commits."""

    identity_file_path: str
    email: str
    username: str
