"""ozy CLI."""

import logging

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ozy.config import OzyConfig, get_config_path, load_config
from ozy.git.hosts import list_git_hosts
from ozy.git.repo import GitManager
from ozy.git.setup import run_setup
from ozy.result import Err
from ozy.ssh.probe import SSHProbe

app = typer.Typer(help="ozy - developer workstation helpers")
git_app = typer.Typer(help="Setup git in repo for verified commits")
app.add_typer(git_app, name="git")
console = Console()


def setup_logging(verbose: bool = False):
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
    logging.getLogger("paramiko").setLevel(logging.WARNING)


def get_config() -> OzyConfig:
    """Load settings, exiting on an unreadable settings file."""
    path = get_config_path()
    try:
        return load_config(path)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        console.print(f"[red]Error:[/red] Invalid config file {path}")
        console.print(escape(str(e)))
        raise typer.Exit(1)


def report_failure(result: Err) -> None:
    """Print a failed result and exit non-zero."""
    if not result.silent:
        console.print(f"[red]Error:[/red] {escape(f'{result.kind.value}: {result.reason}')}")
    raise typer.Exit(1)


@git_app.command()
def setup():
    """Setup verified git commits for current repo."""
    config = get_config()
    setup_logging(config.verbose)

    result = run_setup(
        GitManager(),
        SSHProbe(config.ssh.command),
        ssh_config_path=config.ssh.config_path,
    )
    if isinstance(result, Err):
        report_failure(result)

    console.print(f"[green]Configured signed commits as {escape(result.value.username)}.[/green]")


@git_app.command()
def hosts():
    """Show all configured SSH hosts for the git host (github.com by default)."""
    config = get_config()
    setup_logging(config.verbose)

    result = list_git_hosts(config.ssh.config_path, config.git.host)
    if isinstance(result, Err):
        report_failure(result)

    console.print("Available hosts:")
    for alias in result.value:
        console.print(f" - {escape(alias)}")


if __name__ == "__main__":
    app()
