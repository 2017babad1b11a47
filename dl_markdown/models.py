"""Data models for dl-markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class LineKind(Enum):
    """Classification of a single source line.

    Attributes:
        TERM: A term header (``: text`` indented 0-3 spaces).
        DESCRIPTION: A description header with text (``: text`` or ``:: text``).
        EMPTY_DESCRIPTION: A description marker with no text.
        BLANK: A line without non-whitespace content.
        CONTENT: Anything else.
    """

    TERM = auto()
    DESCRIPTION = auto()
    EMPTY_DESCRIPTION = auto()
    BLANK = auto()
    CONTENT = auto()


class TokenType(str, Enum):
    """Token types emitted for a definition list.

    Values match the token names registered with markdown-it, so core tokens
    compare equal to the host's string token types.
    """

    LIST_OPEN = "dl_list_open"
    LIST_CLOSE = "dl_list_close"
    TERM_OPEN = "dl_dt_open"
    TERM_CLOSE = "dl_dt_close"
    DESCRIPTION_OPEN = "dl_dd_open"
    DESCRIPTION_CLOSE = "dl_dd_close"
    INLINE = "inline"


@dataclass
class Token:
    """A structural or inline token with an optional source range.

    Attributes:
        type: Token type.
        tag: HTML tag name used by the renderer (``dl``, ``dt``, ``dd``), empty
            for inline tokens.
        nesting: 1 for opening tokens, -1 for closing tokens, 0 for inline.
        content: Inline source text; empty for structural tokens.
        map: Zero-based ``[start, end)`` line range, or None.
    """

    type: TokenType
    tag: str
    nesting: int
    content: str = ""
    map: list[int] | None = None


@dataclass(frozen=True)
class TermHeader:
    """A recognized term line.

    Attributes:
        text: Term text with surrounding whitespace removed.
        base_indent: Number of spaces before the marker (0-3).
    """

    text: str
    base_indent: int


@dataclass(frozen=True)
class DescriptionHeader:
    """A recognized description line.

    Attributes:
        text: Description text following the marker.
        starts_nested_list: True for the doubled-marker shorthand (``:: text``).
    """

    text: str
    starts_nested_list: bool = False


@dataclass(frozen=True)
class TermBlock:
    """A term header plus its continuation lines.

    Attributes:
        base_indent: Number of spaces before the term marker.
        text: Term text; continuation lines are joined with newlines.
        next_line: First line after the term block.
    """

    base_indent: int
    text: str
    next_line: int


@dataclass(frozen=True)
class DescriptionBlock:
    """A description header plus its continuation lines.

    Attributes:
        text: Description body, possibly empty or spanning several lines.
        next_line: First line after the description block.
    """

    text: str
    next_line: int


@dataclass(frozen=True)
class DescriptionEntry:
    """A description attached to a term.

    Attributes:
        line: Zero-based line of the description header.
        text: Description body.
    """

    line: int
    text: str


@dataclass
class DlItem:
    """A term and its descriptions, in source order.

    Attributes:
        term_line: Zero-based line of the term header.
        term_text: Term text.
        descriptions: Descriptions attached to the term; empty for term-only items.
    """

    term_line: int
    term_text: str
    descriptions: list[DescriptionEntry] = field(default_factory=list)


@dataclass
class DlBlock:
    """A parsed definition list.

    Attributes:
        start_line: Zero-based line where the list starts.
        end_line: First line not consumed by the list (exclusive).
        items: Items in source order; never empty.
    """

    start_line: int
    end_line: int
    items: list[DlItem]
