"""Plain-text helpers shared by every cell and output renderer."""

from typing import Iterable


def normalize_lines(lines: Iterable[str]) -> str:
    """Strip trailing whitespace from each line and join with newlines.

    Leading whitespace and blank lines are kept as they are.

    Args:
        lines: Text lines, with or without line endings

    Returns:
        str: Normalized text
    """
    return "\n".join(line.rstrip() for line in lines)


def fence(text: str, language: str = "") -> str:
    """Wrap text in a triple-backtick fenced block tagged with ``language``."""
    return f"```{language}\n{text}\n```"
