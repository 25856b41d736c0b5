"""Common state shared by all git documents."""

import logging
from typing import ClassVar

from gitpane.adapters.git_cmd import GitCommandRunner
from gitpane.core.parsers import split_lines
from gitpane.core.presentation import classify
from gitpane.domain.entities import DiffStyle, DocumentKind
from gitpane.ports.vcs import VCS

logger = logging.getLogger(__name__)


class Document:
    """Row-addressable text document backed by git output.

    Attributes:
        name: Display name, e.g. "[Git Status]".
        lines: Rendered lines; never empty.
        readonly: Whether the user may edit the lines.
        modified: Whether the lines changed since the last refresh or save.
        closed: Set once the document has been closed by its host.
        runner: Git runner this document executes commands with.
    """

    kind: ClassVar[DocumentKind]

    def __init__(self, name: str, runner: VCS | None = None) -> None:
        self.name = name
        self.runner: VCS = runner if runner is not None else GitCommandRunner()
        self.lines: list[str] = [""]
        self.readonly = True
        self.modified = False
        self.closed = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def file_path(self) -> str | None:
        """Path of the file this document is about, if any."""
        return None

    def line_at(self, row: int) -> str | None:
        if 0 <= row < len(self.lines):
            return self.lines[row]
        return None

    def refresh_content(self, text: str) -> None:
        """Replace the lines with text, keeping at least one empty line."""
        self.lines = split_lines(text) or [""]
        self.modified = False

    def refresh(self) -> None:
        """Re-run the backing command and re-render.

        A closed document ignores refreshes, so a job that completes after
        its pane was closed leaves nothing behind.
        """
        if self.closed:
            logger.debug("Ignoring refresh of closed document %s", self.name)
            return
        self._reload()

    def _reload(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        self.closed = True


class OutputDocument(Document):
    """Read-only document showing one command's output verbatim.

    Subclasses provide ``_fetch`` and a placeholder used for empty output.
    """

    placeholder: ClassVar[str] = ""

    def _fetch(self) -> str:
        raise NotImplementedError

    def _reload(self) -> None:
        output = self._fetch()
        self.refresh_content(output if output else self.placeholder)


class DiffStyledMixin:
    """Diff line styles for documents showing patch text."""

    lines: list[str]

    def style_at(self, row: int) -> DiffStyle:
        if 0 <= row < len(self.lines):
            return classify(self.lines[row])
        return DiffStyle.NONE

    def line_styles(self) -> list[DiffStyle]:
        return [classify(line) for line in self.lines]
