"""Line buffers the definition list parser reads from.

The parser only needs the raw text of a line by index. `TextLines` wraps a
plain string; `StateLines` is a read-only view of a markdown-it block state,
where container prefixes such as blockquote markers are already excluded by
the line start marks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from markdown_it.rules_block import StateBlock


class LineSource(Protocol):
    """Read-only, line-indexed access to source text."""

    @property
    def line_max(self) -> int:
        """Number of lines available."""
        ...

    def text(self, line: int) -> str:
        """Return the text of a line without its line ending."""
        ...


@dataclass(frozen=True)
class TextLines:
    """Line buffer over a plain string.

    Attributes:
        lines: Lines of the source without line endings.
    """

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> TextLines:
        """Split text on ``\\n`` the way markdown-it does; a trailing newline adds no line.

        Examples:
            TextLines.from_text(": term\\n    : desc\\n").line_max  # 2
        """
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls(tuple(lines))

    @property
    def line_max(self) -> int:
        return len(self.lines)

    def text(self, line: int) -> str:
        return self.lines[line]


class StateLines:
    """Line buffer backed by a markdown-it `StateBlock`."""

    def __init__(self, state: StateBlock):
        self._state = state

    @property
    def line_max(self) -> int:
        return self._state.lineMax

    def text(self, line: int) -> str:
        state = self._state
        return state.src[state.bMarks[line] : state.eMarks[line]]
