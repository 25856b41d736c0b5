"""Unit tests for the commit message editor."""

from unittest.mock import Mock

import pytest

from gitpane.core.documents import CommitEditorDocument
from gitpane.core.documents.commit_editor import committed_message, extract_message
from gitpane.domain.entities import DocumentKind
from tests.helpers.fakes import BRANCH_ARGS, STATUS_ARGS, FakeRunner


@pytest.fixture
def editor_runner(fake_runner: FakeRunner) -> FakeRunner:
    """Runner on branch main with one staged and one unstaged file."""
    fake_runner.set_output(*BRANCH_ARGS, output="main\n")
    fake_runner.set_output(*STATUS_ARGS, output="M  staged.py\n M unstaged.py\n")
    return fake_runner


class TestExtractMessage:
    """Tests for extract_message()."""

    def test_comments_and_surrounding_blanks_dropped(self) -> None:
        """Test the canonical editor buffer."""
        assert extract_message(["", "# comment", "hello", "", "# more", ""]) == "hello"

    def test_inner_blank_lines_kept(self) -> None:
        """Test that a subject and body keep their separating blank line."""
        lines = ["Subject", "", "Body line", "# comment"]

        assert extract_message(lines) == "Subject\n\nBody line"

    def test_only_comments(self) -> None:
        """Test that a buffer of comments and blanks has no message."""
        assert extract_message(["", "# a", "   ", "# b"]) == ""

    def test_indented_hash_is_message_text(self) -> None:
        """Test that only lines starting with '#' are comments."""
        assert extract_message([" #1 fix"]) == "#1 fix"


class TestCommittedMessage:
    """Tests for committed_message()."""

    def test_with_commit_id(self) -> None:
        """Test the message for a parsed summary."""
        assert committed_message("[main 1a2b3c4] msg\n") == "Git: committed [1a2b3c4]"

    def test_without_commit_id(self) -> None:
        """Test the message when git printed no summary."""
        assert committed_message("") == "Git: committed"


class TestTemplate:
    """Tests for the initial editor contents."""

    def test_template_lines(self, editor_runner: FakeRunner) -> None:
        """Test the rendered template for a branch with staged changes."""
        document = CommitEditorDocument(runner=editor_runner)

        assert document.kind is DocumentKind.COMMIT_EDITOR
        assert not document.readonly
        assert not document.modified
        assert document.lines[0] == ""
        assert "# On branch: main" in document.lines
        assert "#   M  staged.py" in document.lines
        assert not any("unstaged.py" in line for line in document.lines)

    def test_no_staged_changes(self, fake_runner: FakeRunner) -> None:
        """Test the placeholder comment when nothing is staged."""
        fake_runner.set_output(*BRANCH_ARGS, output="main\n")

        document = CommitEditorDocument(runner=fake_runner)

        assert "#   (no staged changes)" in document.lines

    def test_branch_failure_uses_unknown(self, fake_runner: FakeRunner) -> None:
        """Test that a failed branch lookup degrades to "unknown"."""
        fake_runner.fail(*BRANCH_ARGS, stderr="fatal: ambiguous argument 'HEAD'\n")

        document = CommitEditorDocument(runner=fake_runner)

        assert "# On branch: unknown" in document.lines

    def test_template_has_no_message(self, editor_runner: FakeRunner) -> None:
        """Test that the untouched template extracts to an empty message."""
        assert CommitEditorDocument(runner=editor_runner).extract_message() == ""


class TestSave:
    """Tests for committing from the editor."""

    def test_empty_message_aborts(self, editor_runner: FakeRunner) -> None:
        """Test that saving the bare template reports an error and stays open."""
        on_message = Mock()
        on_commit = Mock()
        document = CommitEditorDocument(
            runner=editor_runner, on_message=on_message, on_commit=on_commit
        )

        assert document.save() is False

        on_message.assert_called_once_with("Git: empty commit message, aborting", True)
        on_commit.assert_not_called()
        assert not document.closed
        assert not any(call[0] == "commit" for call in editor_runner.calls)

    def test_successful_commit(self, editor_runner: FakeRunner) -> None:
        """Test that a message is committed and the editor closes."""
        editor_runner.set_output("commit", "-m", "Fix bug", output="[main abc1234] Fix bug\n")
        on_message = Mock()
        on_commit = Mock(return_value=None)
        document = CommitEditorDocument(
            runner=editor_runner, on_message=on_message, on_commit=on_commit
        )
        document.set_lines(["Fix bug", *document.lines])
        assert document.modified

        assert document.save() is True

        on_message.assert_called_once_with("Git: committed [abc1234]", False)
        on_commit.assert_called_once_with()
        assert document.closed
        assert not document.modified

    def test_follow_up_failure_reported_with_commit_id(self, editor_runner: FakeRunner) -> None:
        """Test that an on_commit problem is appended to the success message."""
        editor_runner.set_output("commit", "-m", "Fix bug", output="[main abc1234] Fix bug\n")
        on_message = Mock()
        document = CommitEditorDocument(
            runner=editor_runner,
            on_message=on_message,
            on_commit=lambda: "Git error: status failed",
        )
        document.set_lines(["Fix bug"])

        assert document.save() is True

        on_message.assert_called_once_with(
            "Git: committed [abc1234] (Git error: status failed)", True
        )
        assert document.closed

    def test_failed_commit_stays_open(self, editor_runner: FakeRunner) -> None:
        """Test that a git failure keeps the message for a retry."""
        editor_runner.fail("commit", "-m", "Fix bug", stderr="error: hook rejected\n", exit_status=1)
        on_message = Mock()
        document = CommitEditorDocument(runner=editor_runner, on_message=on_message)
        document.set_lines(["Fix bug"])

        assert document.save() is False

        message, is_error = on_message.call_args.args
        assert message.startswith("Git error: ")
        assert "hook rejected" in message
        assert is_error is True
        assert not document.closed
        assert document.lines == ["Fix bug"]

    def test_save_without_callbacks(self, editor_runner: FakeRunner) -> None:
        """Test that callbacks are optional."""
        document = CommitEditorDocument(runner=editor_runner)
        document.set_lines(["msg"])

        assert document.save() is True
