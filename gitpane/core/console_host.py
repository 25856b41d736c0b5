"""Host for running entry commands outside the pane UI."""

import logging

from gitpane.core.documents import Document
from gitpane.core.jobs import SyncJobRunner
from gitpane.ports.host import SplitDirection

logger = logging.getLogger(__name__)


class ConsoleHost(SyncJobRunner):
    """Collects opened documents and messages instead of displaying them.

    Jobs complete inline. The last message and whether it was an error are
    kept so the CLI can print it and pick an exit status.
    """

    def __init__(self) -> None:
        self.documents: list[Document] = []
        self.message: str | None = None
        self.error = False

    @property
    def active_document(self) -> Document | None:
        return self.documents[-1] if self.documents else None

    def cursor_row(self) -> int:
        return 0

    def open_document(self, document: Document, split: SplitDirection = "horizontal") -> None:
        logger.debug("Opened %s", document.name)
        self.documents.append(document)

    def close_document(self, document: Document) -> None:
        document.close()
        if document in self.documents:
            self.documents.remove(document)

    def set_message(self, message: str, error: bool = False) -> None:
        self.message = message
        self.error = error
