"""ozy - configure git repositories for SSH-signed commits."""

__version__ = "0.1.0"
