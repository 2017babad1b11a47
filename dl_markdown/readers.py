"""Readers for term and description blocks.

Both readers start at a header line and absorb continuation lines until a
boundary. They never raise: a start line that is not a header yields None.
"""

from __future__ import annotations

from dataclasses import dataclass

from .classifier import (
    is_blank,
    looks_like_description,
    match_description_header,
    match_empty_description_header,
    match_term,
)
from .constants import BULLET_LIST_PREFIXES, MARKER, ORDERED_LIST_ITEM_PATTERN
from .indent import leading_indent, strip_indent_columns, strip_spaces
from .lines import LineSource
from .models import DescriptionBlock, TermBlock


def is_list_item_start(text: str) -> bool:
    """Return True when text opens a bullet (``- ``) or ordered (``1. ``, ``2) ``) list item."""
    return text.startswith(BULLET_LIST_PREFIXES) or bool(ORDERED_LIST_ITEM_PATTERN.match(text))


def is_two_space_offset_list_item(text: str) -> bool:
    """Return True for a list item shifted right by exactly two spaces."""
    return text.startswith("  ") and is_list_item_start(text[2:])


def read_term_block(
    lines: LineSource, start: int, end: int, description_indent: int
) -> TermBlock | None:
    """Read a term header and its continuation lines.

    Continuation lines must start with a space or tab. They lose up to
    ``base_indent + 2`` leading spaces, the width of the ``: `` prefix, so
    they line up with the header text. A blank line, another term, a
    description header, or an unindented line ends the term.

    Args:
        lines: Source line buffer.
        start: Line holding the candidate term header.
        end: First line outside the range being parsed.
        description_indent: Configured description indent, also the tab width.

    Returns:
        TermBlock | None: The term, or None when `start` is not a term header.

    Examples:
        read_term_block(TextLines.from_text(": a\\n  b\\n    : c"), 0, 3, 4)
        # TermBlock(base_indent=0, text="a\\nb", next_line=2)
    """
    if start >= end:
        return None
    header = match_term(lines.text(start))
    if header is None:
        return None

    min_indent = header.base_indent + description_indent
    parts = [header.text]
    line = start + 1

    while line < end:
        raw = lines.text(line)
        if is_blank(raw):
            break
        if match_term(raw) is not None:
            break
        if looks_like_description(raw, min_indent, description_indent):
            break
        if not raw.startswith((" ", "\t")):
            break

        parts.append(strip_spaces(raw, header.base_indent + 2).rstrip())
        line += 1

    return TermBlock(base_indent=header.base_indent, text="\n".join(parts), next_line=line)


@dataclass(frozen=True)
class _DescriptionScan:
    """Boundary rules shared by content and blank-line lookahead."""

    min_indent: int
    tab_width: int
    empty_header: bool
    starts_nested_list: bool

    def ends_before(self, raw: str) -> bool:
        """Return True when a non-blank line cannot continue the description."""
        if match_term(raw) is not None:
            return True

        indent = leading_indent(raw, self.tab_width)[0]
        if looks_like_description(raw, self.min_indent, self.tab_width):
            # Deeper markers belong to the nested list, not a sibling description
            if not (self.starts_nested_list and indent > self.min_indent):
                return True

        return not self.empty_header and indent < self.min_indent

    def strip(self, raw: str) -> str:
        indent = leading_indent(raw, self.tab_width)[0]
        columns = min(indent, self.min_indent) if self.empty_header else self.min_indent
        return strip_indent_columns(raw, columns, self.tab_width).rstrip()


def read_description_block(
    lines: LineSource, start: int, end: int, base_indent: int, description_indent: int
) -> DescriptionBlock | None:
    """Read a description header and its continuation lines.

    The header must sit at ``base_indent + description_indent`` columns (up to
    three more are tolerated). A ``:: text`` header is rewritten to the body
    line ``: text`` so the body parses as a nested list. Blank lines are kept
    only when the description continues after them.

    Args:
        lines: Source line buffer.
        start: Line holding the candidate description header.
        end: First line outside the range being parsed.
        base_indent: Indentation of the owning term marker.
        description_indent: Configured description indent, also the tab width.

    Returns:
        DescriptionBlock | None: The description body, or None when `start` is
            not a description header.
    """
    if start >= end:
        return None

    tab_width = description_indent
    min_indent = base_indent + description_indent
    raw = lines.text(start)

    header = match_description_header(raw, min_indent, tab_width)
    empty_header = header is None and match_empty_description_header(raw, min_indent, tab_width)
    if header is None and not empty_header:
        return None

    parts: list[str] = []
    starts_with_list = False
    starts_nested_list = False
    if header is not None:
        seed = f"{MARKER} {header.text}" if header.starts_nested_list else header.text
        parts.append(seed)
        starts_with_list = is_list_item_start(seed)
        starts_nested_list = seed.lstrip().startswith(MARKER)

    scan = _DescriptionScan(
        min_indent=min_indent,
        tab_width=tab_width,
        empty_header=empty_header,
        starts_nested_list=starts_nested_list,
    )

    line = start + 1
    while line < end:
        raw = lines.text(line)

        if is_blank(raw):
            following = line + 1
            if following >= end:
                break
            next_raw = lines.text(following)
            if is_blank(next_raw) or scan.ends_before(next_raw):
                break
            parts.append("")
            line += 1
            continue

        if scan.ends_before(raw):
            break

        out = scan.strip(raw)
        # The header's ": " prefix shifts continuation items two columns right
        if starts_with_list and is_two_space_offset_list_item(out):
            out = out[2:]

        parts.append(out)
        line += 1

    return DescriptionBlock(text="\n".join(parts), next_line=line)
