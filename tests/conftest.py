"""Pytest configuration and shared fixtures."""

import subprocess
from pathlib import Path

import pytest

from tests.helpers.fakes import FakeRunner, RecordingHost

# ============================================================================
# Git Repository Helpers
# ============================================================================
# Integration tests drive a real git executable against throwaway
# repositories built with these helpers.

GIT_TIMEOUT = 5


def run_git(path: Path, *args: str) -> str:
    """Run git in ``path`` and return its stdout.

    Raises:
        subprocess.CalledProcessError: If git exits non-zero.
    """
    return subprocess.run(
        ["git", *args],
        cwd=path,
        check=True,
        capture_output=True,
        text=True,
        timeout=GIT_TIMEOUT,
    ).stdout


def init_git_repo(path: Path) -> None:
    """Create an empty repository on branch main with a test identity.

    Commit signing is switched off so a user's global gpg setup cannot
    make commits prompt or fail.
    """
    run_git(path, "init", "-b", "main")
    for key, value in (
        ("user.name", "Test User"),
        ("user.email", "test@example.com"),
        ("commit.gpgsign", "false"),
    ):
        run_git(path, "config", key, value)


def write_files(root: Path, files: dict[str, str]) -> None:
    """Write work tree files, creating parent directories as needed."""
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)


def commit_all(path: Path, message: str = "Initial commit") -> None:
    """Stage everything in the work tree and commit it."""
    run_git(path, "add", "--all")
    run_git(path, "commit", "-m", message)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Repository on main with README.md and app.py in a single commit."""
    repo = tmp_path / "repo"
    repo.mkdir()
    init_git_repo(repo)
    write_files(repo, {"README.md": "# demo\n", "app.py": "print('hello')\n"})
    commit_all(repo)
    return repo


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory.

    Keeps the user's real ~/.config/gitpane/config.toml out of every test.
    """
    config_home = tmp_path / "xdg_config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Create a runner that answers git commands from canned output."""
    return FakeRunner()


@pytest.fixture
def host() -> RecordingHost:
    """Create a host that records documents and messages."""
    return RecordingHost()
