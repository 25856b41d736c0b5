"""Git adapter implementing the VCS protocol using subprocess git commands."""

import logging
import subprocess
from pathlib import Path

from gitpane.ports.vcs import GitCommandError, NotInRepositoryError

logger = logging.getLogger(__name__)


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


def _first_line(text: str) -> str:
    """Return the first line of text, stripped ("" for empty text)."""
    lines = text.splitlines()
    return lines[0].strip() if lines else ""


class GitCommandRunner:
    """Git VCS adapter using subprocess calls to the git CLI.

    Every call spawns exactly one git process in ``cwd`` after a cheap
    ``rev-parse`` probe. Failures are reported, never retried.
    """

    def __init__(self, cwd: Path | None = None, executable: str = "git") -> None:
        """Initialize the runner.

        Args:
            cwd: Directory git is run in. Defaults to the current directory
                at call time.
            executable: Name or path of the git executable.
        """
        self.cwd = cwd
        self.executable = executable

    def _spawn(self, args: tuple[str, ...] | list[str]) -> subprocess.CompletedProcess[bytes]:
        cmd = [self.executable, *args]
        logger.debug("Running %s in %s", cmd, self.cwd or Path.cwd())
        return subprocess.run(cmd, cwd=self.cwd, capture_output=True, check=False)

    def in_git_repository(self) -> bool:
        """Check if cwd is inside a git repository."""
        try:
            result = self._spawn(["rev-parse", "--git-dir"])
        except (FileNotFoundError, NotADirectoryError):
            return False
        return result.returncode == 0

    def _ensure_git_repository(self) -> None:
        if not self.in_git_repository():
            raise NotInRepositoryError()

    def run(self, *args: str) -> str:
        """Run a git command synchronously.

        Args:
            *args: Git command arguments (without 'git' prefix).

        Returns:
            Captured stdout, not line-split.

        Raises:
            NotInRepositoryError: If cwd is not inside a git repository.
            GitCommandError: If git exits non-zero.
        """
        self._ensure_git_repository()

        result = self._spawn(args)
        if result.returncode != 0:
            stderr = _decode(result.stderr)
            logger.debug("git %s exited with %d", " ".join(args), result.returncode)
            raise GitCommandError(
                f"git {' '.join(args)} failed: {_first_line(stderr)}",
                stderr=stderr,
                exit_status=result.returncode,
            )

        return _decode(result.stdout)

    def status(self) -> str:
        return self.run("status", "--porcelain")

    def diff(self, path: str | None = None) -> str:
        if path:
            return self.run("diff", "--", path)
        return self.run("diff")

    def diff_staged(self, path: str | None = None) -> str:
        if path:
            return self.run("diff", "--cached", "--", path)
        return self.run("diff", "--cached")

    def log(self, limit: int = 20, format: str | None = None) -> str:
        """Get the log, one line per commit, bounded by ``limit``."""
        args = ["log", "--oneline", "--decorate", "-n", str(limit)]
        if format:
            args.append(f"--format={format}")
        return self.run(*args)

    def blame(self, path: str) -> str:
        return self.run("blame", "--", path)

    def add(self, path: str) -> str:
        return self.run("add", "--", path)

    def reset(self, path: str) -> str:
        return self.run("reset", "HEAD", "--", path)

    def commit(self, message: str) -> str:
        return self.run("commit", "-m", message)

    def current_branch(self) -> str:
        return self.run("rev-parse", "--abbrev-ref", "HEAD").strip()

    def show(self, commit_hash: str) -> str:
        return self.run("show", "--format=fuller", commit_hash)
