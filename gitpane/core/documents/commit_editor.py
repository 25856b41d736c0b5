"""Writable document for composing a commit message.

Saving the document runs ``git commit`` with the message instead of writing
a file.
"""

import logging
from collections.abc import Callable

from gitpane.core.documents.base import Document
from gitpane.core.parsers import extract_commit_id, staged_lines
from gitpane.domain.entities import DocumentKind
from gitpane.ports.vcs import VCS, GitError

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
UNKNOWN_BRANCH = "unknown"

COMMIT_MSG_TEMPLATE = """\

# Please enter the commit message for your changes.
# Lines starting with '#' will be ignored.
#
# On branch: {branch}
#
# Changes to be committed:
{staged}
"""


def extract_message(lines: list[str]) -> str:
    """Extract the commit message from editor lines.

    Comment lines are dropped and leading/trailing blank lines trimmed.

    Args:
        lines: Lines of the commit editor.

    Returns:
        The message, or "" if nothing but comments and blanks remain.
    """
    message_lines = [line for line in lines if not line.startswith(COMMENT_MARKER)]
    while message_lines and not message_lines[0].strip():
        message_lines.pop(0)
    while message_lines and not message_lines[-1].strip():
        message_lines.pop()
    return "\n".join(message_lines).strip()


def committed_message(output: str) -> str:
    """Build the success message for ``git commit`` output."""
    commit_id = extract_commit_id(output)
    if commit_id:
        return f"Git: committed [{commit_id}]"
    return "Git: committed"


class CommitEditorDocument(Document):
    """Commit message editor.

    Lifecycle: open -> save with a non-empty message and a successful commit
    -> closed. An empty message or a failed commit reports an error and
    leaves the document open so the user can retry or abandon it.
    """

    kind = DocumentKind.COMMIT_EDITOR

    def __init__(
        self,
        runner: VCS | None = None,
        on_message: Callable[[str, bool], None] | None = None,
        on_commit: Callable[[], str | None] | None = None,
    ) -> None:
        """Initialize the editor and render the template.

        Args:
            runner: Git runner used for the template lookups and the commit.
            on_message: Receives (message, is_error) for user feedback.
            on_commit: Called after a successful commit. Returns a description
                of a follow-up failure, or None.

        Raises:
            GitError: If the staged file lookup fails.
        """
        super().__init__("[Git Commit]", runner)
        self.readonly = False
        self.on_message = on_message
        self.on_commit = on_commit
        self._setup_template()

    def _reload(self) -> None:
        self._setup_template()

    def _setup_template(self) -> None:
        try:
            branch = self.runner.current_branch()
        except GitError as e:
            logger.debug("Branch lookup failed, using placeholder: %s", e.message)
            branch = UNKNOWN_BRANCH

        template = COMMIT_MSG_TEMPLATE.format(branch=branch, staged=self._format_staged_files())
        self.refresh_content(template)

    def _format_staged_files(self) -> str:
        staged = staged_lines(self.runner.status())
        if not staged:
            return "#   (no staged changes)"
        return "\n".join(f"#   {line.strip()}" for line in staged)

    def set_lines(self, lines: list[str]) -> None:
        """Replace the lines with the user's edits."""
        self.lines = list(lines) or [""]
        self.modified = True

    def extract_message(self) -> str:
        return extract_message(self.lines)

    def _notify(self, message: str, error: bool = False) -> None:
        if self.on_message is not None:
            self.on_message(message, error)

    def save(self) -> bool:
        """Commit with the current message.

        Returns:
            True if the commit was created and the document closed.
        """
        message = self.extract_message()
        if not message:
            self._notify("Git: empty commit message, aborting", error=True)
            return False

        try:
            output = self.runner.commit(message)
        except GitError as e:
            self._notify(f"Git error: {e.message}", error=True)
            return False

        self.modified = False
        problem = self.on_commit() if self.on_commit is not None else None
        if problem:
            self._notify(f"{committed_message(output)} ({problem})", error=True)
        else:
            self._notify(committed_message(output))
        self.close()
        return True
