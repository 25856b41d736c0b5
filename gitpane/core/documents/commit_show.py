"""Document showing a single commit's patch."""

from gitpane.core.documents.base import DiffStyledMixin, OutputDocument
from gitpane.domain.entities import DocumentKind
from gitpane.ports.vcs import VCS


class CommitShowDocument(DiffStyledMixin, OutputDocument):
    kind = DocumentKind.COMMIT_SHOW
    placeholder = "(no commit data)"

    def __init__(self, commit_hash: str, runner: VCS | None = None) -> None:
        super().__init__(f"[Git Commit: {commit_hash[:7]}]", runner)
        self.commit_hash = commit_hash
        self.refresh()

    def _fetch(self) -> str:
        return self.runner.show(self.commit_hash)
