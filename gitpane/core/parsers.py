"""Parsers for git command output.

All functions here are pure and never raise on unexpected input: lines that
do not fit the expected shape are treated as absent data.
"""

import re

from gitpane.domain.entities import FileEntry

# Log and blame lines both start with the commit hash
_COMMIT_HASH_RE = re.compile(r"^([a-f0-9]{7,40})\s")
_UNCOMMITTED_RE = re.compile(r"^0+$")
# "[main 1a2b3c4] message" from git commit
_COMMIT_ID_RE = re.compile(r"\[.+? ([a-f0-9]+)\]")

# Porcelain lines are "XY path"
_PATH_OFFSET = 3


def split_lines(text: str) -> list[str]:
    r"""Split command output on "\n" only, dropping one trailing "\r" per line.

    Other line boundaries such as form feeds and U+2028 stay inside the line.
    A final newline ends the last line rather than starting an empty one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_status(text: str) -> list[FileEntry]:
    """Parse ``git status --porcelain`` output.

    Args:
        text: Raw status output.

    Returns:
        One FileEntry per non-blank line, in input order. Paths are passed
        through as git renders them (no unquoting).
    """
    entries: list[FileEntry] = []
    for line in split_lines(text):
        if not line.strip() or len(line) < 2:
            continue
        entries.append(
            FileEntry(
                index_status=line[0],
                work_tree_status=line[1],
                path=line[_PATH_OFFSET:].strip(),
            )
        )
    return entries


def staged_lines(text: str) -> list[str]:
    """Return the raw status lines that have something staged in the index."""
    return [
        line
        for line in split_lines(text)
        if line and line[0] not in (" ", "?")
    ]


def extract_commit_hash(line: str | None) -> str | None:
    """Extract the leading commit hash from a log or blame line.

    Args:
        line: A single line of log or blame output.

    Returns:
        The hash, or None if absent or the all-zero "uncommitted" sentinel.
    """
    if not line:
        return None

    match = _COMMIT_HASH_RE.match(line)
    if not match:
        return None

    commit_hash = match.group(1)
    if _UNCOMMITTED_RE.match(commit_hash):
        return None
    return commit_hash


def extract_commit_id(output: str) -> str | None:
    """Extract the short commit id from ``git commit`` summary output."""
    match = _COMMIT_ID_RE.search(output)
    return match.group(1) if match else None
