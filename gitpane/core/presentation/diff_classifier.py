"""Per-line style classification for diff-shaped text."""

from gitpane.domain.entities import DiffStyle

# Checked before the single-character add/delete markers
_HEADER_PREFIXES = ("+++", "---", "diff --git", "index ")


def classify(line: str) -> DiffStyle:
    """Classify one line of diff output.

    Hunk markers win over headers, headers over additions and deletions.

    Args:
        line: A single line of diff or show output.

    Returns:
        The DiffStyle for the whole line.
    """
    if line.startswith("@@"):
        return DiffStyle.HUNK
    if line.startswith(_HEADER_PREFIXES):
        return DiffStyle.HEADER
    if line.startswith("+"):
        return DiffStyle.ADD
    if line.startswith("-"):
        return DiffStyle.DELETE
    return DiffStyle.NONE
