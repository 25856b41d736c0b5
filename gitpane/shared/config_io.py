"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of GitpaneConfig to/from
TOML format.
"""

import os
import platform
import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

import tomli_w

from gitpane.domain.config import GitpaneConfig

LOCAL_CONFIG_NAME = ".gitpane.toml"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/gitpane/config.toml or ~/.config/gitpane/config.toml
    - Windows: %APPDATA%/gitpane/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "gitpane" / "config.toml"
        return Path.home() / ".config" / "gitpane" / "config.toml"

    xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg_config:
        return Path(xdg_config) / "gitpane" / "config.toml"
    return Path.home() / ".config" / "gitpane" / "config.toml"


def get_local_config_path(start_dir: Path | None = None) -> Path:
    """Get the path to the local config file in a directory (may not exist)."""
    return (start_dir or Path.cwd()) / LOCAL_CONFIG_NAME


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def load_config(path: Path) -> GitpaneConfig:
    """Load configuration from a single TOML file over the defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    data = load_config_data(path)
    return GitpaneConfig.from_partial(GitpaneConfig.default(), data)


def config_to_data(config: GitpaneConfig) -> dict[str, Any]:
    """Convert a GitpaneConfig to a TOML-serializable dictionary."""
    return {
        "git": {
            "executable": config.git.executable,
        },
        "log": {
            "limit": config.log.limit,
        },
        "display": {
            "diff_highlighting": config.display.diff_highlighting,
            "mouse_support": config.display.mouse_support,
            "show_help": config.display.show_help,
        },
    }


def save_config(config: GitpaneConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: GitpaneConfig to save
        path: Destination path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(config_to_data(config), f)


def create_default_config_file(path: Path) -> None:
    """Create a default config file with sensible defaults and comments.

    Args:
        path: Destination path
    """
    # Template string keeps the comments that tomli_w would drop
    template = """\
# gitpane configuration
# Created by: gitpane config init

[git]
# Name or path of the git executable
executable = "git"

[log]
# Number of commits shown by 'gitpane log' and ':log' without a limit
limit = 20

[display]
# Color diff and commit views by line kind
diff_highlighting = true

# Enable mouse support in the pane UI
mouse_support = false

# Show the key hint bar at the bottom of the screen
show_help = true
"""

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        f.write(template)
