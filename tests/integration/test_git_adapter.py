"""Integration tests for the git adapter.

These tests create real git repositories and exercise the VCS protocol.
"""

from pathlib import Path

import pytest

from gitpane.adapters.git_cmd import GitCommandRunner
from gitpane.core.parsers import extract_commit_hash, parse_status
from gitpane.ports.vcs import GitCommandError, NotInRepositoryError
from tests.conftest import commit_all, run_git, write_files


@pytest.fixture
def git_runner(git_repo: Path) -> GitCommandRunner:
    """Create a runner for the test repository."""
    return GitCommandRunner(cwd=git_repo)


class TestRepositoryProbe:
    """Tests for in_git_repository()."""

    def test_inside_repository(self, git_runner: GitCommandRunner) -> None:
        """Test the probe in a repository root."""
        assert git_runner.in_git_repository()

    def test_subdirectory(self, git_repo: Path) -> None:
        """Test the probe in a subdirectory of a repository."""
        subdir = git_repo / "src"
        subdir.mkdir()

        assert GitCommandRunner(cwd=subdir).in_git_repository()

    def test_outside_repository(self, tmp_path: Path, monkeypatch) -> None:
        """Test that a plain directory is not a repository."""
        plain = tmp_path / "plain"
        plain.mkdir()
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
        runner = GitCommandRunner(cwd=plain)

        assert not runner.in_git_repository()
        with pytest.raises(NotInRepositoryError):
            runner.status()

    def test_missing_executable(self, git_repo: Path) -> None:
        """Test that a missing git binary means no repository."""
        runner = GitCommandRunner(cwd=git_repo, executable="git-does-not-exist")

        assert not runner.in_git_repository()


class TestStatusAndStaging:
    """Tests for status, add and reset."""

    def test_clean_status(self, git_runner: GitCommandRunner) -> None:
        """Test that a fresh commit leaves a clean tree."""
        assert git_runner.status() == ""

    def test_modified_and_untracked(self, git_repo: Path, git_runner: GitCommandRunner) -> None:
        """Test that porcelain output parses to the expected entries."""
        (git_repo / "README.md").write_text("# changed\n")
        (git_repo / "new.txt").write_text("new\n")

        entries = {e.path: e for e in parse_status(git_runner.status())}

        assert entries["README.md"].unstaged
        assert not entries["README.md"].staged
        assert entries["new.txt"].untracked

    def test_add_and_reset(self, git_repo: Path, git_runner: GitCommandRunner) -> None:
        """Test that add stages and reset unstages a path."""
        (git_repo / "README.md").write_text("# changed\n")

        git_runner.add("README.md")
        assert parse_status(git_runner.status())[0].staged

        git_runner.reset("README.md")
        entry = parse_status(git_runner.status())[0]
        assert not entry.staged
        assert entry.unstaged

    def test_add_missing_path_fails(self, git_runner: GitCommandRunner) -> None:
        """Test that git's error is carried by GitCommandError."""
        with pytest.raises(GitCommandError) as exc_info:
            git_runner.add("does-not-exist.txt")

        assert exc_info.value.exit_status != 0
        assert "does-not-exist.txt" in exc_info.value.stderr


class TestHistory:
    """Tests for log, blame, show and commit."""

    def test_log_lines_carry_hashes(self, git_repo: Path, git_runner: GitCommandRunner) -> None:
        """Test that every log line starts with a commit hash."""
        write_files(git_repo, {"second.txt": "2\n"})
        commit_all(git_repo, message="Second commit")

        lines = git_runner.log(limit=10).splitlines()

        assert len(lines) == 2
        assert "Second commit" in lines[0]
        assert all(extract_commit_hash(line) for line in lines)

    def test_log_limit(self, git_repo: Path, git_runner: GitCommandRunner) -> None:
        """Test that the limit bounds the output."""
        write_files(git_repo, {"second.txt": "2\n"})
        commit_all(git_repo, message="Second commit")

        assert len(git_runner.log(limit=1).splitlines()) == 1

    def test_blame_uncommitted_lines(self, git_repo: Path, git_runner: GitCommandRunner) -> None:
        """Test that committed lines have hashes and uncommitted lines do not."""
        # Lines from the root commit are boundary lines ("^hash"), so blame a
        # line from a later commit
        write_files(git_repo, {"app.py": "print('v2')\n"})
        commit_all(git_repo, message="Second commit")
        (git_repo / "app.py").write_text("print('v2')\nprint('wip')\n")

        lines = git_runner.blame("app.py").splitlines()

        assert extract_commit_hash(lines[0]) is not None
        assert extract_commit_hash(lines[1]) is None

    def test_commit_and_show(self, git_repo: Path, git_runner: GitCommandRunner) -> None:
        """Test committing staged changes and showing the result."""
        (git_repo / "README.md").write_text("# changed\n")
        git_runner.add("README.md")

        output = git_runner.commit("Update readme")

        assert "Update readme" in output
        head = run_git(git_repo, "rev-parse", "HEAD").strip()
        shown = git_runner.show(head)
        assert "CommitDate:" in shown
        assert "+# changed" in shown

    def test_current_branch(self, git_runner: GitCommandRunner) -> None:
        """Test the branch name of the test repository."""
        assert git_runner.current_branch() == "main"

    def test_diff_and_staged_diff(self, git_repo: Path, git_runner: GitCommandRunner) -> None:
        """Test that diff and diff_staged follow the index."""
        (git_repo / "app.py").write_text("print('bye')\n")

        assert "+print('bye')" in git_runner.diff("app.py")
        assert git_runner.diff_staged("app.py") == ""

        git_runner.add("app.py")

        assert git_runner.diff("app.py") == ""
        assert "+print('bye')" in git_runner.diff_staged("app.py")
