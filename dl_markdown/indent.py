"""Indentation arithmetic for definition list lines.

A space is one column and a tab is ``tab_width`` columns. Tabs do not
advance to tab stops: the plugin uses the description indent as the tab
width, so a single tab always lines up with one description level.
"""

from __future__ import annotations

from collections.abc import Iterable


def leading_indent(line: str, tab_width: int) -> tuple[int, int]:
    """Measure the leading whitespace of a line.

    Args:
        line: Line to inspect.
        tab_width: Number of columns contributed by a tab.

    Returns:
        tuple[int, int]: Column count and the index of the first character that
            is neither a space nor a tab.

    Examples:
        leading_indent("    : desc", 4)  # (4, 4)
        leading_indent("\\t: desc", 4)  # (4, 1)
        leading_indent(" \\tx", 2)  # (3, 2)
    """
    columns = 0
    index = 0
    for character in line:
        if character == " ":
            columns += 1
        elif character == "\t":
            columns += tab_width
        else:
            break
        index += 1
    return columns, index


def count_leading_spaces(line: str) -> int:
    """Count leading space characters; tabs stop the count."""
    return len(line) - len(line.lstrip(" "))


def strip_spaces(line: str, limit: int) -> str:
    """Remove at most `limit` leading spaces.

    Examples:
        strip_spaces("     text", 2)  # "   text"
        strip_spaces("\\ttext", 2)  # "\\ttext"
    """
    index = 0
    while index < len(line) and index < limit and line[index] == " ":
        index += 1
    return line[index:]


def strip_indent_columns(line: str, columns: int, tab_width: int) -> str:
    """Remove leading whitespace worth `columns` columns.

    A tab that would overshoot the remaining columns is still removed.

    Args:
        line: Line to strip.
        columns: Number of columns to remove.
        tab_width: Number of columns contributed by a tab.

    Returns:
        str: The line without the stripped indentation.

    Examples:
        strip_indent_columns("      text", 4, 4)  # "  text"
        strip_indent_columns("  \\ttext", 4, 4)  # "text"
    """
    consumed = 0
    index = 0
    while index < len(line) and consumed < columns:
        character = line[index]
        if character == " ":
            consumed += 1
        elif character == "\t":
            consumed += tab_width
        else:
            break
        index += 1
    return line[index:]


def minimum_indent(lines: Iterable[str], tab_width: int) -> int | None:
    """Return the smallest indentation among non-blank lines, or None if all are blank."""
    indents = [leading_indent(line, tab_width)[0] for line in lines if line.strip()]
    return min(indents) if indents else None
