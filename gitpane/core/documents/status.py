"""Interactive status document.

Displays staged and unstaged files and maps cursor rows back to them so
they can be staged and unstaged.
"""

from gitpane.core.documents.base import Document
from gitpane.core.parsers import parse_status
from gitpane.domain.entities import DocumentKind, FileEntry
from gitpane.ports.vcs import VCS

STAGED_HEADER = "Staged:"
UNSTAGED_HEADER = "Unstaged:"
CLEAN_LINE = "Working tree clean"
HELP_LINE = "Press: s=stage, u=unstage, -=toggle, \\d=diff, \\c=commit, \\q=quit, R=refresh"


class StatusDocument(Document):
    """Status listing with staged and unstaged sections.

    Layout, top to bottom:
        row 0                 "Staged:" (when anything is staged)
        rows 1..S             staged entries
        row S+1               blank separator (only when both sections exist)
        row S+2               "Unstaged:" (row 0 when nothing is staged)
        following rows        unstaged entries
        then                  blank line and help line

    An entry with both index and work tree changes appears in both sections.
    """

    kind = DocumentKind.STATUS

    def __init__(self, runner: VCS | None = None) -> None:
        super().__init__("[Git Status]", runner)
        self.files: list[FileEntry] = []
        self.staged_files: list[FileEntry] = []
        self.unstaged_files: list[FileEntry] = []
        self.refresh()

    def _reload(self) -> None:
        output = self.runner.status()
        files = parse_status(output)
        self.files = files
        self.staged_files = [f for f in files if f.staged]
        self.unstaged_files = [f for f in files if f.unstaged or f.untracked]
        self.refresh_content(self._format_display())

    def file_at(self, row: int) -> FileEntry | None:
        """Get the file entry shown on a row, or None for headers and blanks."""
        staged_start_row = 1
        staged_end_row = staged_start_row + len(self.staged_files) - 1

        unstaged_header_row = 0 if not self.staged_files else staged_end_row + 2
        unstaged_start_row = unstaged_header_row + 1

        if self.staged_files and staged_start_row <= row <= staged_end_row:
            return self.staged_files[row - staged_start_row]
        if self.unstaged_files and row >= unstaged_start_row:
            index = row - unstaged_start_row
            if index < len(self.unstaged_files):
                return self.unstaged_files[index]
        return None

    def _format_display(self) -> str:
        lines: list[str] = []

        if self.staged_files:
            lines.append(STAGED_HEADER)
            lines.extend(_format_entry(f) for f in self.staged_files)

        if self.staged_files and self.unstaged_files:
            lines.append("")

        if self.unstaged_files:
            lines.append(UNSTAGED_HEADER)
            lines.extend(_format_entry(f) for f in self.unstaged_files)

        if not lines:
            lines.append(CLEAN_LINE)

        lines.append("")
        lines.append(HELP_LINE)
        return "\n".join(lines)


def _format_entry(entry: FileEntry) -> str:
    return f"  {entry.status_display} {entry.path}"
