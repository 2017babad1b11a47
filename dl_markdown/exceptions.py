"""Package-specific exception types.

The definition list parser itself never raises; these errors belong to the
surfaces around it (files and the command line).
"""

from __future__ import annotations

from pathlib import Path

from .constants import MARKDOWN_EXTENSIONS


class RenderError(ValueError):
    """Base class for errors raised while reading a Markdown source file."""


class NotMarkdownError(RenderError):
    """Raised when a source file does not carry a Markdown extension.

    Args:
        path: File that was rejected.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"{path} is not a Markdown file (expected {', '.join(MARKDOWN_EXTENSIONS)})."
        )


class FileTooLargeError(RenderError):
    """Raised when a file exceeds the configured maximum size.

    Args:
        path: File that was rejected.
        limit: Maximum allowed size in bytes.
    """

    def __init__(self, path: Path, limit: int):
        self.path = path
        self.limit = limit
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"{self.path} exceeds the maximum allowed size of {self.limit} bytes."
