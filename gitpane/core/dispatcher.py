"""Action dispatch for git documents.

Turns user commands and key actions into git invocations and document
updates. Every git failure is caught here and reported as a single status
message; nothing raised by a command escapes a dispatcher method.
"""

import logging
from collections.abc import Callable, Sequence
from typing import cast

from gitpane.adapters.git_cmd import GitCommandRunner
from gitpane.core.documents import (
    BlameDocument,
    CommitEditorDocument,
    CommitShowDocument,
    DiffDocument,
    Document,
    LogDocument,
    StatusDocument,
)
from gitpane.core.documents.commit_editor import committed_message
from gitpane.core.documents.log import DEFAULT_LOG_LIMIT
from gitpane.core.jobs import command_job
from gitpane.domain.entities import DocumentKind, FileEntry, JobResult
from gitpane.ports.host import Host, SplitDirection
from gitpane.ports.vcs import VCS, GitCommandError, NotInRepositoryError

logger = logging.getLogger(__name__)

NOT_IN_REPOSITORY = "Git: not in a git repository"
NO_FILE_SPECIFIED = "Git: no file specified"
NO_COMMIT_AT_CURSOR = "Git: no commit at cursor"
COMMIT_USAGE = "Git: commit message required. Usage: :Git commit <message>"

# Kinds whose rows map back to commits
COMMIT_LOOKUP_KINDS = frozenset({DocumentKind.LOG, DocumentKind.BLAME})
# Kinds that are rendered from a single command and can be re-run
REFRESHABLE_KINDS = frozenset(
    {
        DocumentKind.STATUS,
        DocumentKind.DIFF,
        DocumentKind.LOG,
        DocumentKind.BLAME,
        DocumentKind.COMMIT_SHOW,
    }
)


class ActionDispatcher:
    """Routes commands and key actions to git and the documents.

    Key actions return True when they applied to the focused document's
    kind, False when the key should fall through to the host.
    """

    def __init__(
        self,
        host: Host,
        runner_factory: Callable[[], VCS] = GitCommandRunner,
        log_limit: int = DEFAULT_LOG_LIMIT,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            host: Host the documents are displayed in.
            runner_factory: Creates a runner for top-level commands.
            log_limit: Default number of commits for the log command.
        """
        self.host = host
        self.runner_factory = runner_factory
        self.log_limit = log_limit

    # Entry command

    def execute(self, args: str | Sequence[str]) -> None:
        """Run an entry command such as "log 20" or "commit fix typo".

        Args:
            args: Subcommand and its arguments, as a string or a sequence.
        """
        parts = args.split() if isinstance(args, str) else list(args)
        subcommand = parts[0].strip() if parts else ""

        runner = self.runner_factory()
        if not runner.in_git_repository():
            self._error(NOT_IN_REPOSITORY)
            return

        try:
            self._execute(subcommand, parts[1:], runner)
        except NotInRepositoryError:
            self._error(NOT_IN_REPOSITORY)
        except GitCommandError as e:
            self._error(f"Git error: {e.message}")

    def _execute(self, subcommand: str, rest: list[str], runner: VCS) -> None:
        if subcommand in ("", "status"):
            self.host.open_document(StatusDocument(runner=runner))
        elif subcommand == "diff":
            self._open_file_document(rest[0] if rest else self._current_path(), runner, DiffDocument)
        elif subcommand == "log":
            limit = self._parse_limit(rest[0]) if rest else self.log_limit
            if limit is not None:
                self.host.open_document(LogDocument(runner=runner, limit=limit))
        elif subcommand == "blame":
            self._open_file_document(rest[0] if rest else self._current_path(), runner, BlameDocument)
        elif subcommand == "add":
            self._stage_file(self._resolve_path(rest[0] if rest else None), runner)
        elif subcommand == "commit":
            self._create_commit(" ".join(rest), runner)
        elif subcommand == "show":
            if not rest:
                self._error("Git: no commit specified")
                return
            self.host.open_document(CommitShowDocument(rest[0], runner=runner))
        else:
            self._error(f"Git: unknown command '{subcommand}'")

    def _parse_limit(self, value: str) -> int | None:
        try:
            limit = int(value)
        except ValueError:
            limit = 0
        if limit <= 0:
            self._error(f"Git: invalid log limit '{value}'")
            return None
        return limit

    def _open_file_document(
        self,
        path: str | None,
        runner: VCS,
        factory: Callable[..., Document],
    ) -> None:
        if not path:
            self._error(NO_FILE_SPECIFIED)
            return
        self.host.open_document(factory(path, runner=runner))

    def _stage_file(self, path: str | None, runner: VCS) -> None:
        if not path:
            self._error(NO_FILE_SPECIFIED)
            return
        runner.add(path)
        self.host.set_message(f"Git: staged {path}")

    def _create_commit(self, message: str, runner: VCS) -> None:
        if not message.strip():
            self._error(COMMIT_USAGE)
            return
        output = runner.commit(message)
        self.host.set_message(committed_message(output))

    def _current_path(self) -> str | None:
        document = self.host.active_document
        if document is None:
            return None
        return document.file_path

    def _resolve_path(self, arg: str | None) -> str | None:
        if arg == "%":
            return self._current_path()
        return arg

    # Status document actions

    def stage(self) -> bool:
        """Stage the file under the cursor."""
        document = self._active_status()
        if document is None:
            return False
        entry = document.file_at(self.host.cursor_row())
        if entry is not None:
            self._dispatch_file_job(document, entry, ("add", "--", entry.path), "Staged")
        return True

    def unstage(self) -> bool:
        """Unstage the file under the cursor."""
        document = self._active_status()
        if document is None:
            return False
        entry = document.file_at(self.host.cursor_row())
        if entry is not None:
            self._dispatch_file_job(
                document, entry, ("reset", "HEAD", "--", entry.path), "Unstaged"
            )
        return True

    def toggle(self) -> bool:
        """Unstage the file under the cursor if staged, stage it otherwise."""
        document = self._active_status()
        if document is None:
            return False
        entry = document.file_at(self.host.cursor_row())
        if entry is None:
            return True
        if entry.staged:
            return self.unstage()
        return self.stage()

    def _dispatch_file_job(
        self,
        document: StatusDocument,
        entry: FileEntry,
        args: tuple[str, ...],
        verb: str,
    ) -> None:
        def on_complete(result: JobResult) -> None:
            if not result.success:
                self._error(f"Git error: {result.error_line}")
                return
            if document.closed:
                logger.debug("Status document closed before %s finished", args[0])
            elif not self._refresh(document):
                return
            self.host.set_message(f"{verb}: {entry.path}")

        self.host.run_job(command_job(document.runner, *args), on_complete)

    def show_diff(self) -> bool:
        """Open the diff of the file under the cursor in a vertical split."""
        document = self._active_status()
        if document is None:
            return False
        entry = document.file_at(self.host.cursor_row())
        if entry is None:
            return True
        self._open(
            lambda: DiffDocument(entry.path, runner=document.runner, staged=entry.staged),
            split="vertical",
        )
        return True

    def open_commit_editor(self) -> bool:
        """Open the commit message editor below the status document."""
        status = self._active_status()
        if status is None:
            return False

        def on_commit() -> str | None:
            if status.closed:
                return None
            try:
                status.refresh()
            except NotInRepositoryError:
                return NOT_IN_REPOSITORY
            except GitCommandError as e:
                return f"Git error: {e.message}"
            return None

        self._open(
            lambda: CommitEditorDocument(
                runner=status.runner,
                on_message=self.host.set_message,
                on_commit=on_commit,
            )
        )
        return True

    # Commit editor actions

    def save(self) -> bool:
        """Commit with the focused commit editor's message."""
        document = cast(
            CommitEditorDocument | None, self._active(DocumentKind.COMMIT_EDITOR)
        )
        if document is None:
            return False
        if document.save():
            self.host.close_document(document)
        return True

    # Log and blame actions

    def show_commit(self) -> bool:
        """Open the commit under the cursor in a vertical split."""
        document = self.host.active_document
        if document is None or document.kind not in COMMIT_LOOKUP_KINDS:
            return False
        lookup = cast(LogDocument | BlameDocument, document)
        commit_hash = lookup.commit_at(self.host.cursor_row())
        if commit_hash is None:
            self._error(NO_COMMIT_AT_CURSOR)
            return True
        self._open(
            lambda: CommitShowDocument(commit_hash, runner=document.runner),
            split="vertical",
        )
        return True

    # Actions on any document

    def refresh(self) -> bool:
        """Re-run the focused document's command."""
        document = self.host.active_document
        if document is None or document.kind not in REFRESHABLE_KINDS:
            return False
        if self._refresh(document):
            if document.kind is DocumentKind.STATUS:
                self.host.set_message("Git: status refreshed")
            else:
                self.host.set_message("Git: refreshed")
        return True

    def quit(self) -> bool:
        """Close the focused document."""
        document = self.host.active_document
        if document is None:
            return False
        self.host.close_document(document)
        return True

    # Helpers

    def _active(self, kind: DocumentKind) -> Document | None:
        document = self.host.active_document
        if document is None or document.kind is not kind:
            return None
        return document

    def _active_status(self) -> StatusDocument | None:
        return cast(StatusDocument | None, self._active(DocumentKind.STATUS))

    def _open(
        self,
        factory: Callable[[], Document],
        split: SplitDirection = "horizontal",
    ) -> None:
        try:
            document = factory()
        except NotInRepositoryError:
            self._error(NOT_IN_REPOSITORY)
            return
        except GitCommandError as e:
            self._error(f"Git error: {e.message}")
            return
        self.host.open_document(document, split=split)

    def _refresh(self, document: Document) -> bool:
        try:
            document.refresh()
        except NotInRepositoryError:
            self._error(NOT_IN_REPOSITORY)
            return False
        except GitCommandError as e:
            self._error(f"Git error: {e.message}")
            return False
        return True

    def _error(self, message: str) -> None:
        logger.debug(message)
        self.host.set_message(message, error=True)
