"""Configuration provider port.

Defines the interface for loading and accessing application configuration.
"""

from pathlib import Path
from typing import Protocol

from gitpane.domain.config import GitpaneConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, start_dir: Path | None = None) -> GitpaneConfig:
        """Load configuration for a working directory.

        Args:
            start_dir: Directory holding the local config file.
                Defaults to the current directory.

        Returns:
            GitpaneConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config files are missing or invalid.
        """
        ...
