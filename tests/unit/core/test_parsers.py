"""Unit tests for git output parsers."""

import pytest

from gitpane.core.parsers import (
    extract_commit_hash,
    extract_commit_id,
    parse_status,
    split_lines,
    staged_lines,
)


class TestSplitLines:
    """Tests for splitting command output into rows."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a"]),
            ("a\n\n", ["a", ""]),
            ("\n", [""]),
            ("a\r\nb\r\n", ["a", "b"]),
            ("a\rb\n", ["a\rb"]),
            ("page\x0cbreak\x0b\x1c\x85\u2028\u2029end\n", ["page\x0cbreak\x0b\x1c\x85\u2028\u2029end"]),
        ],
    )
    def test_split(self, text: str, expected: list[str]) -> None:
        assert split_lines(text) == expected


class TestParseStatus:
    """Tests for porcelain status parsing."""

    def test_entries_in_input_order(self) -> None:
        """Test that every line becomes one entry in order."""
        entries = parse_status("M  staged.py\n M modified.py\n?? new.py\n")

        assert [e.path for e in entries] == ["staged.py", "modified.py", "new.py"]
        assert [(e.index_status, e.work_tree_status) for e in entries] == [
            ("M", " "),
            (" ", "M"),
            ("?", "?"),
        ]

    def test_blank_lines_skipped(self) -> None:
        """Test that blank and whitespace-only lines are ignored."""
        entries = parse_status("\nM  a.py\n   \n\n")

        assert len(entries) == 1
        assert entries[0].path == "a.py"

    def test_empty_output_returns_no_entries(self) -> None:
        """Test that a clean tree parses to an empty list."""
        assert parse_status("") == []

    def test_short_lines_skipped(self) -> None:
        """Test that lines too short for a status code are ignored."""
        assert parse_status("M\n") == []

    def test_path_with_spaces_kept(self) -> None:
        """Test that the path is everything after the status code."""
        entries = parse_status(" M docs/my notes.txt\n")

        assert entries[0].path == "docs/my notes.txt"

    def test_rename_path_passed_through(self) -> None:
        """Test that rename lines keep git's rendering verbatim."""
        entries = parse_status("R  old.py -> new.py\n")

        assert entries[0].path == "old.py -> new.py"
        assert entries[0].staged

    def test_quoted_path_not_unquoted(self) -> None:
        """Test that quoted paths are passed through as git printed them."""
        entries = parse_status('?? "sp\\303\\244m.txt"\n')

        assert entries[0].path == '"sp\\303\\244m.txt"'


class TestStagedLines:
    """Tests for the staged line filter used by the commit template."""

    def test_keeps_only_index_changes(self) -> None:
        """Test that unstaged and untracked lines are dropped."""
        output = "M  a.py\n M b.py\n?? c.py\nA  d.py\nMM e.py\n"

        assert staged_lines(output) == ["M  a.py", "A  d.py", "MM e.py"]

    def test_empty_output(self) -> None:
        """Test that no output means no staged lines."""
        assert staged_lines("") == []


class TestExtractCommitHash:
    """Tests for commit hash extraction from log and blame lines."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("abc1234 (HEAD -> main) Add feature", "abc1234"),
            ("abc1234 Fix typo", "abc1234"),
            (
                "0123456789abcdef0123456789abcdef01234567 full hash",
                "0123456789abcdef0123456789abcdef01234567",
            ),
            ("abc12345 (Test User 2024-01-01 12:00:00 +0000  1) code", "abc12345"),
            ("^abc1234 (Test User 2024-01-01 12:00:00 +0000  1) boundary", None),
            ("0000000 (Not Committed Yet 2024-01-01 12:00:00 +0000  3) x", None),
            ("00000000 (Not Committed Yet 2024-01-01 12:00:00 +0000  3) x", None),
            ("abc123 too short", None),
            ("ABC1234 uppercase", None),
            ("abc1234", None),
            ("", None),
            (None, None),
        ],
    )
    def test_extract(self, line: str | None, expected: str | None) -> None:
        """Test hash extraction for log, blame and edge-case lines."""
        assert extract_commit_hash(line) == expected

    def test_zero_prefix_with_other_digits_is_a_hash(self) -> None:
        """Test that only the all-zero hash is the uncommitted sentinel."""
        assert extract_commit_hash("0000001 commit") == "0000001"


class TestExtractCommitId:
    """Tests for parsing the short id from git commit output."""

    def test_branch_and_id(self) -> None:
        """Test the usual "[branch id] message" summary."""
        output = "[main 1a2b3c4] Fix typo\n 1 file changed, 1 insertion(+)\n"

        assert extract_commit_id(output) == "1a2b3c4"

    def test_root_commit(self) -> None:
        """Test the root commit summary form."""
        output = "[main (root-commit) 1a2b3c4] Initial commit\n"

        assert extract_commit_id(output) == "1a2b3c4"

    def test_no_summary(self) -> None:
        """Test that output without a summary yields None."""
        assert extract_commit_id("nothing to commit") is None


class TestLineBoundaries:
    """Tests that porcelain parsing only breaks rows on newlines."""

    def test_path_with_form_feed(self) -> None:
        """Test that a form feed in a path does not start a new entry."""
        entries = parse_status(" M odd\x0cname.txt\n")

        assert len(entries) == 1
        assert entries[0].path == "odd\x0cname.txt"

    def test_staged_line_with_line_separator(self) -> None:
        """Test that U+2028 in a staged path stays in one line."""
        assert staged_lines("A  a\u2028b.txt\r\n M c.txt\n") == ["A  a\u2028b.txt"]
