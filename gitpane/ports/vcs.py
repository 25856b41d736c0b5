"""Version Control System (VCS) port interface.

Defines the command execution contract the documents depend on, and the two
failure kinds a git invocation can produce.
"""

from typing import Protocol


class GitError(Exception):
    """Base exception for git command failures.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class NotInRepositoryError(GitError):
    """Raised when the repository presence probe fails."""

    def __init__(self) -> None:
        super().__init__(
            "Not in a git repository",
            hint="Run gitpane from inside a git working tree",
        )


class GitCommandError(GitError):
    """Raised when git ran and exited non-zero.

    Attributes:
        stderr: Full captured standard error text.
        exit_status: Process exit code.
    """

    def __init__(
        self,
        message: str,
        stderr: str | None = None,
        exit_status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.stderr = stderr
        self.exit_status = exit_status


class VCS(Protocol):
    """Protocol for the git operations used by documents and actions."""

    def in_git_repository(self) -> bool:
        """Check whether the working directory is inside a git repository."""
        ...

    def run(self, *args: str) -> str:
        """Run git with the given arguments.

        Args:
            *args: Git arguments (without the 'git' prefix).

        Returns:
            Captured standard output, verbatim.

        Raises:
            NotInRepositoryError: If the repository presence probe fails.
            GitCommandError: If git exits non-zero.
        """
        ...

    def status(self) -> str:
        """Get status in porcelain format."""
        ...

    def diff(self, path: str | None = None) -> str:
        """Get the unstaged diff, optionally for one path."""
        ...

    def diff_staged(self, path: str | None = None) -> str:
        """Get the staged diff, optionally for one path."""
        ...

    def log(self, limit: int = 20, format: str | None = None) -> str:
        """Get one line per commit, most recent first."""
        ...

    def blame(self, path: str) -> str:
        """Get per-line attribution for a path."""
        ...

    def add(self, path: str) -> str:
        """Stage a single path."""
        ...

    def reset(self, path: str) -> str:
        """Unstage a single path."""
        ...

    def commit(self, message: str) -> str:
        """Create a commit and return git's summary output."""
        ...

    def current_branch(self) -> str:
        """Get the abbreviated name of the checked out ref."""
        ...

    def show(self, commit_hash: str) -> str:
        """Get fuller-format patch text for one commit."""
        ...
