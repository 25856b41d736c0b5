"""Document listing recent commits."""

from gitpane.core.documents.base import OutputDocument
from gitpane.core.parsers import extract_commit_hash
from gitpane.domain.entities import DocumentKind
from gitpane.ports.vcs import VCS

DEFAULT_LOG_LIMIT = 20


class LogDocument(OutputDocument):
    """One line per commit, most recent first.

    Log format: "abc1234 (HEAD -> main) commit message"
    """

    kind = DocumentKind.LOG
    placeholder = "(no commits)"

    def __init__(self, runner: VCS | None = None, limit: int = DEFAULT_LOG_LIMIT) -> None:
        super().__init__("[Git Log]", runner)
        self.limit = limit
        self.refresh()

    def _fetch(self) -> str:
        return self.runner.log(limit=self.limit)

    def commit_at(self, row: int) -> str | None:
        """Get the commit hash on a row."""
        return extract_commit_hash(self.line_at(row))
