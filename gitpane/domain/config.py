"""Config domain models for gitpane.

Configuration is stored in TOML files and represents user preferences for
running git, the log view and pane display. This module defines the domain
models that represent validated configuration state.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any


@dataclass(frozen=True)
class GitConfig:
    """Configuration for running git.

    Attributes:
        executable: Name or path of the git executable.

    Raises:
        ValueError: If executable is empty.
    """

    executable: str = "git"

    def __post_init__(self) -> None:
        """Validate git config after initialization."""
        if not isinstance(self.executable, str) or not self.executable.strip():
            raise ValueError("executable must not be empty")


@dataclass(frozen=True)
class LogConfig:
    """Configuration for the log view.

    Attributes:
        limit: Default number of commits shown by the log command.

    Raises:
        ValueError: If limit is not positive.
    """

    limit: int = 20

    def __post_init__(self) -> None:
        """Validate log config after initialization."""
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise ValueError(f"limit must be an integer, got {self.limit!r}")
        if self.limit <= 0:
            raise ValueError(f"limit must be positive, got {self.limit}")


@dataclass(frozen=True)
class DisplayConfig:
    """Configuration for pane display.

    Attributes:
        diff_highlighting: Color diff and commit documents by line kind.
        mouse_support: Enable mouse support in the pane UI.
        show_help: Show the key hint bar at the bottom of the screen.
    """

    diff_highlighting: bool = True
    mouse_support: bool = False
    show_help: bool = True


@dataclass(frozen=True)
class GitpaneConfig:
    """Complete gitpane configuration.

    Attributes:
        git: Git execution configuration
        log: Log view configuration
        display: Display configuration
    """

    git: GitConfig = field(default_factory=GitConfig)
    log: LogConfig = field(default_factory=LogConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @staticmethod
    def default() -> "GitpaneConfig":
        """Create a config with all default values."""
        return GitpaneConfig(
            git=GitConfig(),
            log=LogConfig(),
            display=DisplayConfig(),
        )

    @staticmethod
    def from_partial(base: "GitpaneConfig", data: dict[str, Any]) -> "GitpaneConfig":
        """Create a new config with the sections present in data overriding base.

        Unknown sections and keys are ignored. Each section is re-validated.

        Args:
            base: Config to start from.
            data: Raw TOML data.

        Returns:
            Merged GitpaneConfig.

        Raises:
            ValueError: If a section is not a table or a value is invalid.
        """
        overrides: dict[str, Any] = {}
        for section in fields(base):
            section_data = data.get(section.name)
            if section_data is None:
                continue
            if not isinstance(section_data, dict):
                raise ValueError(f"[{section.name}] must be a table")
            current = getattr(base, section.name)
            known = {f.name for f in fields(current)}
            values = {k: v for k, v in section_data.items() if k in known}
            try:
                overrides[section.name] = replace(current, **values)
            except TypeError as e:
                raise ValueError(f"Invalid [{section.name}] section: {e}") from e
        return replace(base, **overrides)
