"""markdown-it-py integration.

Registers the colon definition list as a block rule placed before
``paragraph``. markdown-it's ``silent`` mode maps onto `parser.probe`; the
commit path assembles the list, emits tokens and advances ``state.line``.

No renderer rules are added: the default HTML renderer turns the ``dl``,
``dt`` and ``dd`` tags of the emitted tokens into markup.

Example:
    >>> from markdown_it import MarkdownIt
    >>> from dl_markdown.plugin import dl_list_plugin
    >>> md = MarkdownIt("commonmark").use(dl_list_plugin, description_indent=2)
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from typing import TYPE_CHECKING

from markdown_it import MarkdownIt

from .config import DlConfig, apply_overrides, normalize_config
from .constants import DEPTH_ENV_KEY, RULE_NAME
from .emitter import emit_tokens
from .lines import StateLines
from .logger import get_logger
from .models import Token, TokenType
from .normalizer import BlockToken
from .parser import parse_block, probe

if TYPE_CHECKING:
    from markdown_it.rules_block import StateBlock
    from markdown_it.token import Token as HostToken

logger = get_logger(__name__)


def _parse_nested(state: StateBlock, text: str) -> list[HostToken]:
    """Run the host block parser on a description body.

    Tokens go to a fresh list; the nesting depth is tracked in ``env`` so
    lists opened by the nested parse see it.
    """
    env = state.env
    env[DEPTH_ENV_KEY] = env.get(DEPTH_ENV_KEY, 0) + 1
    try:
        tokens: list[HostToken] = []
        state.md.block.parse(text, state.md, env, tokens)
        return tokens
    finally:
        env[DEPTH_ENV_KEY] -= 1


def _push_tokens(state: StateBlock, tokens: Sequence[Token | BlockToken]) -> None:
    for token in tokens:
        if isinstance(token, Token):
            pushed = state.push(token.type.value, token.tag, token.nesting)
            pushed.map = token.map
            if token.type is TokenType.INLINE:
                pushed.content = token.content
                pushed.children = []
            continue

        # Host tokens from a nested parse count levels from zero
        token.level += state.level
        state.tokens.append(token)


def _make_rule(config: DlConfig):
    def dl_list_rule(state: StateBlock, start_line: int, end_line: int, silent: bool) -> bool:
        lines = StateLines(state)
        if not probe(lines, start_line, end_line, config):
            return False
        if silent:
            return True

        block = parse_block(lines, start_line, end_line, config)
        if block is None:
            return False

        depth = state.env.get(DEPTH_ENV_KEY, 0)
        tokens = emit_tokens(block, config, partial(_parse_nested, state), depth)
        _push_tokens(state, tokens)
        state.line = block.end_line
        return True

    return dl_list_rule


def dl_list_plugin(md: MarkdownIt, config: DlConfig | None = None, **overrides: object) -> None:
    """Register the colon definition list rule on a markdown-it instance.

    Args:
        md: Parser to extend.
        config: Base configuration; defaults to `DlConfig()`.
        overrides: Configuration fields to override (``description_indent``,
            ``require_description``, ``break_on_blank_line``); None values are
            ignored.

    Raises:
        TypeError: If an override name is not a configuration field.

    Examples:
        MarkdownIt().use(dl_list_plugin, require_description=False)
    """
    effective = normalize_config(apply_overrides(config or DlConfig(), **overrides))
    md.block.ruler.before("paragraph", RULE_NAME, _make_rule(effective))
    logger.debug("Registered %s with %s", RULE_NAME, effective)


def create_markdown(config: DlConfig | None = None, preset: str = "commonmark") -> MarkdownIt:
    """Build a markdown-it parser with the definition list rule enabled."""
    return MarkdownIt(preset).use(dl_list_plugin, config=config)


def render(text: str, config: DlConfig | None = None) -> str:
    """Render Markdown with colon definition lists to HTML.

    Examples:
        render(": term\\n    : desc\\n")
        # "<dl>\\n<dt>term</dt>\\n<dd>desc</dd>\\n</dl>\\n"
    """
    return create_markdown(config).render(text)
