"""Git documents.

Components:
- StatusDocument: Staged/unstaged listing with row-to-file mapping
- DiffDocument: Diff of one path
- LogDocument: Recent commits with row-to-commit mapping
- BlameDocument: Per-line attribution with row-to-commit mapping
- CommitShowDocument: Patch of one commit
- CommitEditorDocument: Writable commit message buffer
"""

from gitpane.core.documents.base import Document
from gitpane.core.documents.blame import BlameDocument
from gitpane.core.documents.commit_editor import CommitEditorDocument
from gitpane.core.documents.commit_show import CommitShowDocument
from gitpane.core.documents.diff import DiffDocument
from gitpane.core.documents.log import LogDocument
from gitpane.core.documents.status import StatusDocument

__all__ = [
    "Document",
    "StatusDocument",
    "DiffDocument",
    "LogDocument",
    "BlameDocument",
    "CommitShowDocument",
    "CommitEditorDocument",
]
