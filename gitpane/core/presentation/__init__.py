"""Presentation layer for document styling.

Components:
- classify: Per-line diff style classification
- GitpaneColors: Color palette for click and prompt_toolkit output
"""

from gitpane.core.presentation.colors import DIFF_STYLE_CLASSES, GitpaneColors
from gitpane.core.presentation.diff_classifier import classify

__all__ = [
    "classify",
    "GitpaneColors",
    "DIFF_STYLE_CLASSES",
]
