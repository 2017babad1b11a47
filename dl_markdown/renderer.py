"""Rendering Markdown files that contain colon definition lists."""

from __future__ import annotations

from pathlib import Path

from .config import DlConfig
from .constants import DEFAULT_MAX_FILE_SIZE, MARKDOWN_EXTENSIONS
from .exceptions import FileTooLargeError, NotMarkdownError, RenderError
from .logger import get_logger
from .plugin import create_markdown

logger = get_logger(__name__)


class RenderFileError(Exception):
    """Raised when rendering a Markdown file fails."""


def read_markdown(filepath: Path, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a Markdown source file as UTF-8 text.

    The extension and size are checked before any content is read.

    Args:
        filepath: Path to the Markdown file.
        max_file_size: Maximum accepted file size in bytes.

    Returns:
        str: File content.

    Raises:
        NotMarkdownError: If the extension is not a Markdown one.
        FileTooLargeError: If the file is larger than `max_file_size`.
        RenderError: If the file cannot be read or is not valid UTF-8.
    """
    if filepath.suffix.lower() not in MARKDOWN_EXTENSIONS:
        raise NotMarkdownError(filepath)

    try:
        size = filepath.stat().st_size
    except OSError as error:
        raise RenderError(f"Error accessing {filepath}: {error.strerror}") from error
    if size > max_file_size:
        raise FileTooLargeError(filepath, max_file_size)

    try:
        return filepath.read_text(encoding="UTF-8")
    except UnicodeDecodeError as error:
        raise RenderError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except OSError as error:
        raise RenderError(f"Error reading {filepath}: {error.strerror}") from error


def render_file(
    filepath: Path,
    config: DlConfig | None = None,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
) -> str:
    """Render a Markdown file to HTML.

    Args:
        filepath: Path to the Markdown file.
        config: Definition list configuration; defaults to `DlConfig()`.
        max_file_size: Maximum accepted file size in bytes.

    Returns:
        str: Rendered HTML.

    Raises:
        RenderFileError: If `read_markdown` rejects the file.

    Examples:
        html = render_file(Path("glossary.md"), DlConfig(description_indent=2))
    """
    try:
        content = read_markdown(filepath, max_file_size)
    except RenderError as error:
        raise RenderFileError(str(error)) from error

    logger.debug("Rendering %s (%d characters)", filepath, len(content))
    return create_markdown(config).render(content)
