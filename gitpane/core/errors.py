"""Errors surfaced by the gitpane command line."""

from typing import NoReturn

import click

from gitpane.ports.vcs import GitError


class GitpaneCliError(click.ClickException):
    """A click error that can carry a one-line hint.

    click prints ``format_message()`` after "Error: " and exits with status 1.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        if not self.hint:
            return self.message
        return f"{self.message}\nHint: {self.hint}"

    @classmethod
    def from_git_error(cls, error: GitError) -> "GitpaneCliError":
        """Wrap a git error, keeping its hint."""
        return cls(error.message, hint=error.hint)


def config_exists_error(path: str) -> NoReturn:
    """Refuse to overwrite an existing config file."""
    raise GitpaneCliError(
        f"Config file already exists: {path}",
        hint="Pass --force to overwrite it",
    )
