"""Subprocess-backed git adapter."""

from gitpane.adapters.git_cmd.git_adapter import GitCommandRunner

__all__ = ["GitCommandRunner"]
