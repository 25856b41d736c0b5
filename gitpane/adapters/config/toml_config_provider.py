"""Layered TOML configuration.

Layers, lowest precedence first: built-in defaults, the global file under
the user config directory, then ./.gitpane.toml in the working directory.
"""

import logging
from pathlib import Path

from gitpane.domain.config import GitpaneConfig
from gitpane.shared.config_io import (
    get_global_config_path,
    get_local_config_path,
    load_config_data,
)

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Loads GitpaneConfig by folding each existing TOML layer over the defaults.

    A layer only replaces the keys it sets, so a local file holding
    ``[log] limit = 5`` keeps every other value from the global file. A layer
    that cannot be parsed or fails validation is skipped with a warning.
    """

    def __init__(self, global_path: Path | None = None) -> None:
        self._global_path = global_path

    def layers(self, start_dir: Path | None = None) -> list[tuple[str, Path]]:
        """Return the (label, path) config layers in application order."""
        return [
            ("global", self._global_path or get_global_config_path()),
            ("local", get_local_config_path(start_dir)),
        ]

    def load(self, start_dir: Path | None = None) -> GitpaneConfig:
        """Load the merged configuration for ``start_dir`` (default: cwd)."""
        config = GitpaneConfig.default()
        for label, path in self.layers(start_dir):
            if not path.is_file():
                continue
            try:
                config = GitpaneConfig.from_partial(config, load_config_data(path))
            except (FileNotFoundError, ValueError) as e:
                logger.warning("Ignoring %s config %s: %s", label, path, e)
                continue
            logger.debug("Applied %s config from %s", label, path)
        return config
