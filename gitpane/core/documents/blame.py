"""Document showing per-line attribution of one path."""

from pathlib import PurePath

from gitpane.core.documents.base import OutputDocument
from gitpane.core.parsers import extract_commit_hash
from gitpane.domain.entities import DocumentKind
from gitpane.ports.vcs import VCS


class BlameDocument(OutputDocument):
    """Blame output with commit selection.

    Blame format: "abc12345 (Author Name 2024-01-01 12:00:00 +0900  1) code"
    Uncommitted lines carry the all-zero hash and select nothing.
    """

    kind = DocumentKind.BLAME
    placeholder = "(no blame data)"

    def __init__(self, path: str, runner: VCS | None = None) -> None:
        super().__init__(f"[Git Blame: {PurePath(path).name}]", runner)
        self.path = path
        self.refresh()

    @property
    def file_path(self) -> str | None:
        return self.path

    def _fetch(self) -> str:
        return self.runner.blame(self.path)

    def commit_at(self, row: int) -> str | None:
        """Get the commit hash on a row."""
        return extract_commit_hash(self.line_at(row))
