"""
dl-markdown: colon definition lists for markdown-it-py.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    dl-markdown glossary.md

Library Usage:
    from markdown_it import MarkdownIt
    from dl_markdown import dl_list_plugin

    md = MarkdownIt("commonmark").use(dl_list_plugin, description_indent=4)
    html = md.render(": term\\n    : description\\n")

Parser Usage:
    from dl_markdown import parse_text

    block = parse_text(": term\\n    : d1\\n    : d2\\n")
    [entry.text for entry in block.items[0].descriptions]  # ["d1", "d2"]
"""

from .config import ConfigError, DlConfig, build_config, clamp_indent, load_config
from .emitter import emit_tokens
from .exceptions import FileTooLargeError, NotMarkdownError, RenderError
from .lines import LineSource, StateLines, TextLines
from .models import (
    DescriptionEntry,
    DlBlock,
    DlItem,
    Token,
    TokenType,
)
from .parser import parse_block, parse_text, probe
from .plugin import create_markdown, dl_list_plugin, render
from .renderer import RenderFileError, read_markdown, render_file

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "probe",
    "parse_block",
    "parse_text",
    "emit_tokens",
    # markdown-it integration
    "dl_list_plugin",
    "create_markdown",
    "render",
    "read_markdown",
    "render_file",
    # Data models
    "DlBlock",
    "DlItem",
    "DescriptionEntry",
    "Token",
    "TokenType",
    "LineSource",
    "TextLines",
    "StateLines",
    # Configuration
    "DlConfig",
    "build_config",
    "clamp_indent",
    "load_config",
    # Exceptions
    "ConfigError",
    "FileTooLargeError",
    "NotMarkdownError",
    "RenderError",
    "RenderFileError",
    # Version
    "__version__",
]
