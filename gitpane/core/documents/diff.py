"""Document showing the diff of one path."""

from pathlib import PurePath

from gitpane.core.documents.base import DiffStyledMixin, OutputDocument
from gitpane.domain.entities import DocumentKind
from gitpane.ports.vcs import VCS


class DiffDocument(DiffStyledMixin, OutputDocument):
    """Unified diff of a path against the index, or of the index against HEAD."""

    kind = DocumentKind.DIFF
    placeholder = "(no changes)"

    def __init__(self, path: str, runner: VCS | None = None, staged: bool = False) -> None:
        super().__init__(f"[Git Diff: {PurePath(path).name}]", runner)
        self.path = path
        self.staged = staged
        self.refresh()

    @property
    def file_path(self) -> str | None:
        return self.path

    def _fetch(self) -> str:
        if self.staged:
            return self.runner.diff_staged(self.path)
        return self.runner.diff(self.path)
