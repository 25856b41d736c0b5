"""Factory classes for adapter instantiation.

Keeps the CLI layer free from direct adapter imports. Factories import
lazily so that commands only load what they use.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitpane.domain.config import GitpaneConfig
    from gitpane.ports.config import ConfigProvider
    from gitpane.ports.vcs import VCS


class ConfigFactory:
    """Factory for creating configuration providers."""

    def create_config_provider(self, global_path: Path | None = None) -> ConfigProvider:
        """Create the TOML config provider.

        Args:
            global_path: Override for the global config location.

        Returns:
            ConfigProvider instance.
        """
        from gitpane.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider(global_path=global_path)


class RunnerFactory:
    """Factory for creating git runners from configuration.

    Args:
        config: GitpaneConfig with git settings.
        cwd: Working directory for git commands.
    """

    def __init__(self, config: GitpaneConfig, cwd: Path | None = None) -> None:
        self._config = config
        self._cwd = cwd

    def __call__(self) -> VCS:
        """Create a runner using the configured git executable."""
        from gitpane.adapters.git_cmd import GitCommandRunner

        return GitCommandRunner(cwd=self._cwd, executable=self._config.git.executable)
