"""Writing rendered output."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_output(filepath: Path, content: str):
    """Write rendered HTML atomically.

    The HTML goes to a temporary file beside `filepath`, which then replaces
    the destination; a failed write leaves an existing file untouched.

    Args:
        filepath: Destination path.
        content: Text to write.

    Raises:
        IOError: If the destination is a symlink or cannot be written.

    Examples:
        write_output(Path("glossary.html"), "<dl>...</dl>\\n")
    """
    if filepath.is_symlink():
        raise IOError(f"Refusing to write through a symlink: {filepath}")

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", delete=False, dir=filepath.parent, suffix=".tmp"
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
        os.replace(temp_path, filepath)
        temp_path = None
    except OSError as error:
        raise IOError(f"Error writing {filepath}: {error}") from error
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
