"""Line classification for colon definition lists."""

from __future__ import annotations

from .constants import DESCRIPTION_INDENT_TOLERANCE, MARKER, TERM_PATTERN
from .indent import count_leading_spaces, leading_indent
from .models import DescriptionHeader, LineKind, TermHeader


def is_blank(line: str) -> bool:
    """Return True when the line has no non-whitespace content."""
    return not line.strip()


def match_term(line: str) -> TermHeader | None:
    """Match a term header.

    A term is ``: text`` preceded by at most three spaces. Tabs are not
    allowed before the marker, and four or more spaces is an indented code
    block rather than a term.

    Args:
        line: Line to inspect, without its line ending.

    Returns:
        TermHeader | None: The term text and its base indent, or None.

    Examples:
        match_term(": apple")  # TermHeader(text="apple", base_indent=0)
        match_term("   :\\tpear  ")  # TermHeader(text="pear", base_indent=3)
        match_term("    : code")  # None
    """
    match = TERM_PATTERN.match(line)
    if not match:
        return None
    text = match.group(2).strip()
    if not text:
        return None
    return TermHeader(text=text, base_indent=count_leading_spaces(line))


def _marker_at(line: str, min_indent: int, tab_width: int) -> tuple[int, int] | None:
    """Locate a one- or two-character marker at description indentation.

    Returns:
        tuple[int, int] | None: Index of the first marker character and the
            marker length, or None when the indentation is out of range or no
            marker follows it.
    """
    columns, index = leading_indent(line, tab_width)
    if columns < min_indent or columns > min_indent + DESCRIPTION_INDENT_TOLERANCE:
        return None
    if line.startswith(MARKER * 2, index):
        return index, 2
    if line.startswith(MARKER, index):
        return index, 1
    return None


def match_description_header(
    line: str, min_indent: int, tab_width: int
) -> DescriptionHeader | None:
    """Match a description header at the given indentation level.

    The marker must sit between `min_indent` and `min_indent + 3` columns.
    A single marker introduces a plain description; a doubled marker
    (``:: text``) is shorthand for a description whose body is a nested list
    starting with the term ``text``.

    Args:
        line: Line to inspect.
        min_indent: Minimum indentation in columns (term indent plus the
            configured description indent).
        tab_width: Number of columns contributed by a tab.

    Returns:
        DescriptionHeader | None: The header, or None when the line does not
            match or carries no text.

    Examples:
        match_description_header("    : desc", 4, 4)  # DescriptionHeader("desc")
        match_description_header("    :: inner", 4, 4)  # starts_nested_list=True
        match_description_header("  : desc", 4, 4)  # None
    """
    located = _marker_at(line, min_indent, tab_width)
    if located is None:
        return None
    index, marker_length = located

    after = index + marker_length
    if after >= len(line) or line[after] not in " \t":
        return None

    text = line[after:].strip()
    if not text:
        return None
    return DescriptionHeader(text=text, starts_nested_list=marker_length == 2)


def match_empty_description_header(line: str, min_indent: int, tab_width: int) -> bool:
    """Return True for a bare ``:`` or ``::`` marker at description indentation."""
    located = _marker_at(line, min_indent, tab_width)
    if located is None:
        return False
    index, marker_length = located
    return not line[index + marker_length :].strip()


def looks_like_description(line: str, min_indent: int, tab_width: int) -> bool:
    """Return True when the line is a description header, with or without text."""
    return match_description_header(
        line, min_indent, tab_width
    ) is not None or match_empty_description_header(line, min_indent, tab_width)


def classify_line(line: str, min_indent: int, tab_width: int) -> LineKind:
    """Classify a line, checking term, description, blank, then content.

    Examples:
        classify_line(": term", 4, 4)  # LineKind.TERM
        classify_line("    :", 4, 4)  # LineKind.EMPTY_DESCRIPTION
        classify_line("text", 4, 4)  # LineKind.CONTENT
    """
    if match_term(line) is not None:
        return LineKind.TERM
    if match_description_header(line, min_indent, tab_width) is not None:
        return LineKind.DESCRIPTION
    if match_empty_description_header(line, min_indent, tab_width):
        return LineKind.EMPTY_DESCRIPTION
    if is_blank(line):
        return LineKind.BLANK
    return LineKind.CONTENT
