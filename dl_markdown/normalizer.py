"""Reshaping of block-level description bodies.

A description whose body spans several lines, or holds a nested definition
list, is handed back to the host's block parser. Every step here is a pure
function: normalize the text, parse it, shift the returned line ranges, and
unwrap a lone paragraph.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any, Protocol

from .constants import (
    INDENTED_MARKER_PATTERN,
    MARKER,
    NESTED_LIST_INDENT,
    NESTED_TERM_SHIFT_PATTERN,
)
from .indent import count_leading_spaces, minimum_indent, strip_indent_columns, strip_spaces


class BlockToken(Protocol):
    """The token shape the normalizer relies on.

    markdown-it tokens and `models.Token` both satisfy it; both are
    dataclasses, so ranges are shifted with `dataclasses.replace`.
    """

    type: Any
    map: list[int] | None


BlockParser = Callable[[str], Sequence[BlockToken]]


def looks_like_nested_list(text: str) -> bool:
    """Return True when a description body holds a nested definition list.

    Examples:
        looks_like_nested_list(": inner\\n    : d1")  # True
        looks_like_nested_list("plain text")  # False
    """
    if text.lstrip().startswith(MARKER):
        return True
    marker_lines = sum(1 for line in text.split("\n") if line.lstrip().startswith(MARKER))
    return marker_lines > 1


def should_block_parse(text: str) -> bool:
    """Return True when a description body needs the host's block parser."""
    return "\n" in text or looks_like_nested_list(text)


def normalize_nested_list_text(text: str) -> str:
    """Align the lines of a nested definition list body.

    Sibling terms inside the body may sit up to three spaces right of the
    first line; that shift is removed from every continuation line. Marker
    lines indented four or more spaces are then pinned to exactly four, the
    default description indent of the nested list. Blank lines become empty.

    Args:
        text: Description body whose first line is a term.

    Returns:
        str: Body ready for re-parsing.

    Examples:
        normalize_nested_list_text(": apple\\n       : Orin")
        # ": apple\\n    : Orin"
        normalize_nested_list_text(": Orin\\n      : old\\n  : Fuji")
        # ": Orin\\n    : old\\n: Fuji"
    """
    lines = text.split("\n")
    if len(lines) <= 1:
        return text

    term_shift = 0
    for line in lines[1:]:
        if not line.strip():
            continue
        match = NESTED_TERM_SHIFT_PATTERN.match(line)
        if match:
            term_shift = len(match.group(1))
            break

    normalized = [lines[0]]
    for line in lines[1:]:
        if not line.strip():
            normalized.append("")
            continue

        shifted = strip_spaces(line, term_shift) if term_shift else line
        match = INDENTED_MARKER_PATTERN.match(shifted)
        if match and count_leading_spaces(match.group(1)) >= len(NESTED_LIST_INDENT):
            shifted = f"{NESTED_LIST_INDENT}{MARKER}{match.group(2)}"
        normalized.append(shifted)

    return "\n".join(normalized)


def dedent_block(text: str, tab_width: int) -> str:
    """Remove the smallest indentation shared by all non-blank lines.

    Text whose minimum indentation is already zero is returned unchanged.

    Examples:
        dedent_block("  a\\n    b", 4)  # "a\\n  b"
    """
    lines = text.split("\n")
    smallest = minimum_indent(lines, tab_width)
    if not smallest:
        return text
    return "\n".join(
        strip_indent_columns(line, smallest, tab_width) if line.strip() else "" for line in lines
    )


def shift_token_maps(tokens: Sequence[BlockToken], offset: int) -> list[BlockToken]:
    """Return copies of `tokens` with their line ranges moved by `offset`."""
    return [
        replace(token, map=[token.map[0] + offset, token.map[1] + offset]) if token.map else token
        for token in tokens
    ]


def unwrap_single_paragraph(tokens: Sequence[BlockToken]) -> list[BlockToken]:
    """Replace a lone ``paragraph_open, inline, paragraph_close`` run by its inline token.

    The inline token inherits the paragraph's range when it has none of its own.
    """
    if len(tokens) != 3:
        return list(tokens)
    paragraph, inline, closing = tokens
    if (paragraph.type, inline.type, closing.type) != (
        "paragraph_open",
        "inline",
        "paragraph_close",
    ):
        return list(tokens)
    if inline.map is None and paragraph.map is not None:
        inline = replace(inline, map=list(paragraph.map))
    return [inline]


def render_description_content(
    text: str, line: int, tab_width: int, block_parser: BlockParser
) -> list[BlockToken]:
    """Parse a block-level description body into host tokens.

    Args:
        text: Description body.
        line: Zero-based source line of the description header; returned
            ranges are shifted by it.
        tab_width: Number of columns contributed by a tab.
        block_parser: Host callback turning text into block tokens with
            ranges relative to that text.

    Returns:
        list[BlockToken]: Host tokens for the description content.
    """
    source = normalize_nested_list_text(text) if looks_like_nested_list(text) else text
    tokens = block_parser(dedent_block(source, tab_width))
    return unwrap_single_paragraph(shift_token_maps(tokens, line))
