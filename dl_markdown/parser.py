"""Definition list assembly.

`probe` and `parse_block` share the same readers. A host calls `probe` to ask
whether a definition list starts at a line without producing output, and
`parse_block` to build the list it then commits to.
"""

from __future__ import annotations

from .classifier import is_blank, looks_like_description, match_term
from .config import DlConfig, normalize_config
from .lines import LineSource, TextLines
from .models import DescriptionEntry, DlBlock, DlItem, TermBlock
from .readers import read_description_block, read_term_block


def is_term_only_boundary(lines: LineSource, line: int, end: int) -> bool:
    """Return True at the end of the range or on a blank line."""
    return line >= end or is_blank(lines.text(line))


def is_next_line_term(lines: LineSource, line: int, end: int) -> bool:
    """Return True when `line` starts another term at the same list level."""
    if line >= end:
        return False
    raw = lines.text(line)
    return not is_blank(raw) and match_term(raw) is not None


def has_description_at_same_level(
    lines: LineSource, term: TermBlock, end: int, config: DlConfig
) -> bool:
    """Return True when a description header directly follows the term."""
    if term.next_line >= end:
        return False
    min_indent = term.base_indent + config.description_indent
    return looks_like_description(
        lines.text(term.next_line), min_indent, config.description_indent
    )


def collect_descriptions(
    lines: LineSource, term: TermBlock, end: int, config: DlConfig
) -> tuple[list[DescriptionEntry], int]:
    """Read consecutive descriptions following a term.

    Stops at a blank line, a line that is not a description header, or the
    end of the range.

    Args:
        lines: Source line buffer.
        term: Term block the descriptions belong to.
        end: First line outside the range being parsed.
        config: Normalized configuration.

    Returns:
        tuple[list[DescriptionEntry], int]: Descriptions in source order and
            the first line after them.
    """
    descriptions: list[DescriptionEntry] = []
    line = term.next_line

    while line < end:
        if is_blank(lines.text(line)):
            break
        block = read_description_block(
            lines, line, end, term.base_indent, config.description_indent
        )
        if block is None:
            break
        descriptions.append(DescriptionEntry(line=line, text=block.text))
        line = block.next_line

    return descriptions, line


def probe(lines: LineSource, start: int, end: int, config: DlConfig | None = None) -> bool:
    """Check whether a definition list starts at `start`.

    Reads the first term only. The check passes when a description follows
    it, or, for a term without descriptions, when the term is followed by a
    blank line, the end of the range, or another term. With
    ``require_description=False`` any term passes.

    Args:
        lines: Source line buffer.
        start: Candidate first line.
        end: First line outside the range being parsed.
        config: Parser configuration; defaults to `DlConfig()`.

    Returns:
        bool: True when `parse_block` would claim this position.

    Examples:
        probe(TextLines.from_text(": term\\n    : desc"), 0, 2)  # True
        probe(TextLines.from_text(": term\\ntext"), 0, 2)  # False
    """
    config = normalize_config(config or DlConfig())

    term = read_term_block(lines, start, end, config.description_indent)
    if term is None:
        return False
    if not config.require_description:
        return True
    if has_description_at_same_level(lines, term, end, config):
        return True
    return is_term_only_boundary(lines, term.next_line, end) or is_next_line_term(
        lines, term.next_line, end
    )


def parse_block(
    lines: LineSource, start: int, end: int, config: DlConfig | None = None
) -> DlBlock | None:
    """Assemble a definition list starting at `start`.

    Items are read until no term matches. A term without descriptions is kept
    when it sits at a boundary or directly before another term; consecutive
    terms keep the list going, while a trailing term-only item ends it. A
    blank line after an item ends the list, either through
    ``break_on_blank_line`` or because no term matches it.

    Args:
        lines: Source line buffer.
        start: First line of the list.
        end: First line outside the range being parsed.
        config: Parser configuration; defaults to `DlConfig()`.

    Returns:
        DlBlock | None: The list with at least one item, or None when no item
            could be read.

    Examples:
        block = parse_block(TextLines.from_text(": t\\n    : d1\\n    : d2"), 0, 3)
        [entry.text for entry in block.items[0].descriptions]  # ["d1", "d2"]
    """
    config = normalize_config(config or DlConfig())
    items: list[DlItem] = []
    line = start

    while line < end:
        term = read_term_block(lines, line, end, config.description_indent)
        if term is None:
            break

        descriptions, after_descriptions = collect_descriptions(lines, term, end, config)

        if not descriptions:
            at_boundary = is_term_only_boundary(lines, term.next_line, end)
            followed_by_term = is_next_line_term(lines, term.next_line, end)
            if config.require_description and not at_boundary and not followed_by_term:
                break

            items.append(DlItem(term_line=line, term_text=term.text))
            line = term.next_line
            if followed_by_term:
                continue
            break

        items.append(DlItem(term_line=line, term_text=term.text, descriptions=descriptions))
        line = after_descriptions

        if config.break_on_blank_line and line < end and is_blank(lines.text(line)):
            break

    if not items:
        return None
    return DlBlock(start_line=start, end_line=line, items=items)


def parse_text(text: str, config: DlConfig | None = None) -> DlBlock | None:
    """Parse a definition list starting at the first line of `text`.

    Examples:
        parse_text(": term\\n    : desc\\n").items[0].term_text  # "term"
    """
    lines = TextLines.from_text(text)
    return parse_block(lines, 0, lines.line_max, config)
