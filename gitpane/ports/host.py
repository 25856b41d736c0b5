"""Host port interface.

The host owns panes, cursor positions and the message line. The dispatcher
only talks to it through this protocol, so the same actions drive the
prompt_toolkit front end, the CLI and the tests.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal, Protocol

from gitpane.domain.entities import JobResult

if TYPE_CHECKING:
    from gitpane.core.documents import Document

SplitDirection = Literal["horizontal", "vertical"]

Job = Callable[[], JobResult]
JobCallback = Callable[[JobResult], None]


class Host(Protocol):
    """Protocol for the environment documents are displayed in."""

    @property
    def active_document(self) -> "Document | None":
        """The focused document, if any."""
        ...

    def cursor_row(self) -> int:
        """Row of the cursor in the focused document."""
        ...

    def open_document(self, document: "Document", split: SplitDirection = "horizontal") -> None:
        """Show a document in a new pane and focus it."""
        ...

    def close_document(self, document: "Document") -> None:
        """Close the pane showing a document."""
        ...

    def set_message(self, message: str, error: bool = False) -> None:
        """Show a one-line status message."""
        ...

    def run_job(self, job: Job, on_complete: JobCallback) -> None:
        """Run a job without blocking the UI.

        ``on_complete`` must be invoked exactly once, on the UI thread, with
        the job's result.
        """
        ...
