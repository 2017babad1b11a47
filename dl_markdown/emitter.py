"""Token emission for parsed definition lists."""

from __future__ import annotations

from .config import DlConfig, normalize_config
from .constants import MAX_NESTING_DEPTH
from .logger import get_logger
from .models import DescriptionEntry, DlBlock, Token, TokenType
from .normalizer import BlockParser, BlockToken, render_description_content, should_block_parse

logger = get_logger(__name__)


def _inline(text: str, line: int) -> Token:
    return Token(TokenType.INLINE, "", 0, content=text, map=[line, line + 1])


def _description_content(
    entry: DescriptionEntry, config: DlConfig, block_parser: BlockParser | None, depth: int
) -> list[Token | BlockToken]:
    if not should_block_parse(entry.text) or block_parser is None:
        return [_inline(entry.text, entry.line)]
    if depth >= MAX_NESTING_DEPTH:
        logger.debug(
            "Nesting depth %d reached at line %d; keeping description as inline text",
            depth,
            entry.line + 1,
        )
        return [_inline(entry.text, entry.line)]
    return render_description_content(
        entry.text, entry.line, config.description_indent, block_parser
    )


def emit_tokens(
    block: DlBlock,
    config: DlConfig | None = None,
    block_parser: BlockParser | None = None,
    depth: int = 0,
) -> list[Token | BlockToken]:
    """Turn a parsed list into a balanced token sequence.

    Terms become inline spans. A description becomes an inline span when it is
    a single line that does not open a nested list; otherwise its body is
    re-parsed with `block_parser`. Without a block parser, or once `depth`
    reaches `MAX_NESTING_DEPTH`, such bodies are kept as one inline span.

    Args:
        block: Parsed definition list.
        config: Parser configuration; defaults to `DlConfig()`.
        block_parser: Host callback used for block-level description bodies.
        depth: Number of definition lists already open around this one.

    Returns:
        list[Token | BlockToken]: ``dl_list_open`` ... ``dl_list_close`` with
            host tokens spliced in for re-parsed descriptions.

    Examples:
        [token.type.value for token in emit_tokens(parse_text(": t\\n    : d"))]
        # ["dl_list_open", "dl_dt_open", "inline", "dl_dt_close",
        #  "dl_dd_open", "inline", "dl_dd_close", "dl_list_close"]
    """
    config = normalize_config(config or DlConfig())
    tokens: list[Token | BlockToken] = [
        Token(TokenType.LIST_OPEN, "dl", 1, map=[block.start_line, block.end_line])
    ]

    for item in block.items:
        tokens.append(Token(TokenType.TERM_OPEN, "dt", 1, map=[item.term_line, item.term_line + 1]))
        tokens.append(_inline(item.term_text, item.term_line))
        tokens.append(Token(TokenType.TERM_CLOSE, "dt", -1))

        for entry in item.descriptions:
            tokens.append(
                Token(TokenType.DESCRIPTION_OPEN, "dd", 1, map=[entry.line, entry.line + 1])
            )
            tokens.extend(_description_content(entry, config, block_parser, depth))
            tokens.append(Token(TokenType.DESCRIPTION_CLOSE, "dd", -1))

    tokens.append(Token(TokenType.LIST_CLOSE, "dl", -1))
    return tokens
