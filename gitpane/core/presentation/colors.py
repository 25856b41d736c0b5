"""Centralized color definitions for all gitpane output.

Provides a consistent color scheme across CLI messages and the interactive
panes. Supports both click-style colors and prompt_toolkit styles.
"""

from typing import Literal

from gitpane.domain.entities import DiffStyle

# Type aliases for color values
ClickColor = Literal["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

# prompt_toolkit style class for each diff line style
DIFF_STYLE_CLASSES: dict[DiffStyle, str] = {
    DiffStyle.HUNK: "class:diff.hunk",
    DiffStyle.HEADER: "class:diff.header",
    DiffStyle.ADD: "class:diff.add",
    DiffStyle.DELETE: "class:diff.delete",
    DiffStyle.NONE: "",
}


class GitpaneColors:
    """Centralized color palette for consistent output across gitpane."""

    # === Status Message Colors ===
    SUCCESS_FG: ClickColor = "green"
    ERROR_FG: ClickColor = "red"

    @staticmethod
    def get_prompt_toolkit_style() -> dict[str, str]:
        """Get style dictionary for prompt_toolkit Style.from_dict().

        Uses ANSI color names instead of hex codes so colors adapt to the
        user's terminal theme.

        Returns:
            Dictionary mapping style class names to style definitions.
        """
        return {
            "separator": "fg:ansibrightblack",
            "dimmed": "fg:ansibrightblack",
            "title": "bold",
            "title.focused": "bold reverse",
            "message": "",
            "message.error": "fg:ansired",
            "command": "bold",
            "diff.hunk": "fg:ansicyan",
            "diff.header": "bold",
            "diff.add": "fg:ansigreen",
            "diff.delete": "fg:ansired",
        }

    @staticmethod
    def click_error(text: str) -> str:
        """Style error text for click output."""
        import click
        return click.style(text, fg=GitpaneColors.ERROR_FG)

    @staticmethod
    def click_success(text: str) -> str:
        """Style success text for click output."""
        import click
        return click.style(text, fg=GitpaneColors.SUCCESS_FG)
