"""Gitpane CLI entrypoint.

Command-line interface for the gitpane git front end.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from gitpane.domain.config import GitpaneConfig

from gitpane.core.console_host import ConsoleHost
from gitpane.core.dispatcher import NOT_IN_REPOSITORY, ActionDispatcher
from gitpane.core.errors import GitpaneCliError, config_exists_error
from gitpane.core.presentation import GitpaneColors
from gitpane.ports.vcs import GitError, NotInRepositoryError
from gitpane.version import __version__

logger = logging.getLogger(__name__)


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    GitpaneCliError exceptions are re-raised to use their built-in
    formatting. Git errors become CLI errors with their hint, anything else
    is reported as unexpected, with a traceback in verbose mode.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except GitpaneCliError:
                # Let GitpaneCliError propagate to use its format_message()
                raise
            except GitError as e:
                raise GitpaneCliError.from_git_error(e) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise GitpaneCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_config(start_dir: Path | None = None) -> GitpaneConfig:
    """Load configuration merged from the global and local config files.

    Args:
        start_dir: Directory holding the local config. Defaults to cwd.

    Returns:
        GitpaneConfig with merged global and local settings.
    """
    from gitpane.adapters.factory import ConfigFactory

    return ConfigFactory().create_config_provider().load(start_dir)


def _run_command(args: list[str]) -> tuple[ConsoleHost, GitpaneConfig]:
    """Run an entry command against a console host.

    Raises:
        GitpaneCliError: If the command reported an error.
    """
    from gitpane.adapters.factory import RunnerFactory

    config = _load_config()
    host = ConsoleHost()
    dispatcher = ActionDispatcher(
        host=host,
        runner_factory=RunnerFactory(config),
        log_limit=config.log.limit,
    )
    dispatcher.execute(args)

    if host.error:
        if host.message == NOT_IN_REPOSITORY:
            raise GitpaneCliError(host.message, hint=NotInRepositoryError().hint)
        raise GitpaneCliError(host.message or f"{args[0]} failed")
    return host, config


def _open_ui(args: list[str]) -> None:
    """Open the pane UI showing the document produced by an entry command."""
    from gitpane.adapters.factory import RunnerFactory
    from gitpane.adapters.tui.git_ui import GitPaneUI

    host, config = _run_command(args)
    if not host.documents:
        raise GitpaneCliError(host.message or "Nothing to show")

    ui = GitPaneUI(config=config, runner_factory=RunnerFactory(config))
    for document in host.documents:
        ui.open_document(document)
    ui.run()


def _report(ctx: click.Context, host: ConsoleHost) -> None:
    if host.message and not ctx.obj.get("quiet", False):
        click.echo(GitpaneColors.click_success(host.message))


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gitpane")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress non-essential output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """Gitpane - git status, diffs, log and blame in terminal panes.

    Without a command, opens the status view of the current repository.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        ctx.invoke(status)


@cli.command()
@handle_cli_errors("status")
def status() -> None:
    """Show staged and unstaged files.

    \b
    Keys in the status view:
      s / u / -   stage, unstage or toggle the file under the cursor
      \\d          diff the file under the cursor
      \\c          write a commit message
      R           refresh
      \\q          close the pane
    """
    _open_ui(["status"])


@cli.command()
@click.argument("path", required=False)
@handle_cli_errors("diff")
def diff(path: str | None) -> None:
    """Show unstaged changes of PATH."""
    _open_ui(["diff", path] if path else ["diff"])


@cli.command()
@click.option(
    "--limit",
    "-n",
    type=int,
    default=None,
    help="Number of commits to show (default from config).",
)
@handle_cli_errors("log")
def log(limit: int | None) -> None:
    """Show recent commits.

    Press Enter or \\r on a commit to open it.
    """
    _open_ui(["log", str(limit)] if limit is not None else ["log"])


@cli.command()
@click.argument("path", required=False)
@handle_cli_errors("blame")
def blame(path: str | None) -> None:
    """Show who last changed each line of PATH."""
    _open_ui(["blame", path] if path else ["blame"])


@cli.command()
@click.argument("commit_hash", metavar="HASH")
@handle_cli_errors("show")
def show(commit_hash: str) -> None:
    """Show the commit HASH with its diff."""
    _open_ui(["show", commit_hash])


@cli.command()
@click.argument("path")
@click.pass_context
@handle_cli_errors("add")
def add(ctx: click.Context, path: str) -> None:
    """Stage PATH."""
    host, _ = _run_command(["add", path])
    _report(ctx, host)


@cli.command()
@click.argument("message", nargs=-1, required=True)
@click.pass_context
@handle_cli_errors("commit")
def commit(ctx: click.Context, message: tuple[str, ...]) -> None:
    """Commit staged changes with MESSAGE.

    \b
    Examples:
      gitpane commit fix typo in readme
      gitpane commit "Add parser; handle empty input"
    """
    host, _ = _run_command(["commit", *message])
    _report(ctx, host)


@cli.group()
def config() -> None:
    """Manage gitpane configuration files.

    Gitpane uses a two-tier configuration system:
    - Local: ./.gitpane.toml (per working directory)
    - Global: ~/.config/gitpane/config.toml (user defaults)

    Local settings override global settings. Missing values use built-in defaults.
    """
    pass


@config.command(name="path")
@click.option(
    "--global", "-g", "show_global", is_flag=True, help="Show only global config path"
)
@click.option(
    "--local", "-l", "show_local", is_flag=True, help="Show only local config path"
)
@handle_cli_errors("config path")
def config_path(show_global: bool, show_local: bool) -> None:
    """Print config file path(s) for use in scripts.

    Outputs bare paths without any decoration, suitable for piping.
    """
    from gitpane.shared.config_io import get_global_config_path, get_local_config_path

    global_path = get_global_config_path()
    local_path = get_local_config_path()

    if show_global:
        click.echo(global_path)
        return

    if show_local:
        click.echo(local_path)
        return

    # Default: show both
    click.echo(f"global:{global_path}")
    click.echo(f"local:{local_path}")


@config.command(name="init")
@click.option(
    "--global", "-g", "init_global", is_flag=True, help="Create the global config file"
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
@handle_cli_errors("config init")
def config_init(ctx: click.Context, init_global: bool, force: bool) -> None:
    """Create a config file with default settings and comments."""
    from gitpane.shared.config_io import (
        create_default_config_file,
        get_global_config_path,
        get_local_config_path,
    )

    path = get_global_config_path() if init_global else get_local_config_path()
    if path.exists() and not force:
        config_exists_error(str(path))

    create_default_config_file(path)
    logger.debug("Wrote default config to %s", path)
    if not ctx.obj.get("quiet", False):
        click.echo(GitpaneColors.click_success(f"Created config at {path}"))


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(GitpaneColors.click_error(f"Error: {e}"), err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
