"""Domain entities and value objects.

Core models for the git documents. These are pure Python dataclasses and
enums with no dependencies on infrastructure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Index column values that mean "nothing staged"
_NOT_STAGED = (" ", "?")


class DocumentKind(str, Enum):
    """Closed set of document kinds.

    Actions are routed on a document's kind rather than its class:
    - STATUS: staged/unstaged file listing
    - DIFF: unified diff of one path
    - LOG: one line per commit
    - BLAME: per-line attribution of one path
    - COMMIT_SHOW: patch text of one commit
    - COMMIT_EDITOR: writable commit message buffer
    """

    STATUS = "status"
    DIFF = "diff"
    LOG = "log"
    BLAME = "blame"
    COMMIT_SHOW = "commit_show"
    COMMIT_EDITOR = "commit_editor"


class DiffStyle(str, Enum):
    """Presentation class of a single diff-shaped line."""

    HUNK = "hunk"
    HEADER = "header"
    ADD = "add"
    DELETE = "delete"
    NONE = "none"


@dataclass(frozen=True)
class FileEntry:
    """One line of porcelain status output.

    Attributes:
        index_status: Index column; space or '?' means nothing staged.
        work_tree_status: Work tree column; space means unmodified.
        path: Repository-relative path as git printed it.
    """

    index_status: str
    work_tree_status: str
    path: str

    @property
    def staged(self) -> bool:
        return self.index_status not in _NOT_STAGED

    @property
    def unstaged(self) -> bool:
        return self.work_tree_status != " "

    @property
    def untracked(self) -> bool:
        return self.index_status == "?" and self.work_tree_status == "?"

    @property
    def status_display(self) -> str:
        """Two-character status code shown next to the path."""
        if self.untracked:
            return "??"
        if self.staged and self.unstaged:
            return f"{self.index_status}{self.work_tree_status}"
        if self.staged:
            return f"{self.index_status} "
        if self.unstaged:
            return f" {self.work_tree_status}"
        return "  "


@dataclass(frozen=True)
class JobResult:
    """Outcome of a command dispatched as a background job.

    Attributes:
        success: True if git exited zero.
        stdout: Captured standard output ("" on failure).
        stderr: Captured standard error or the failure message.
        exit_status: Process exit code, None if git never ran.
    """

    success: bool
    stdout: str = ""
    stderr: str = ""
    exit_status: int | None = 0

    @property
    def error_line(self) -> str:
        """First line of stderr, stripped."""
        lines = self.stderr.splitlines()
        return lines[0].strip() if lines else ""
