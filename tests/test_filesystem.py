from __future__ import annotations

import os
from pathlib import Path

import pytest

from dl_markdown.exceptions import FileTooLargeError, NotMarkdownError, RenderError
from dl_markdown.filesystem import write_output
from dl_markdown.renderer import RenderFileError, read_markdown, render_file


def _write(tmp_path: Path, name: str, content: str) -> Path:
    target = tmp_path / name
    target.write_text(content, encoding="utf-8")
    return target


@pytest.mark.parametrize("name", ["doc.md", "Notes.MARKDOWN"])
def test_read_markdown_accepts_markdown_extensions(tmp_path: Path, name: str):
    target = _write(tmp_path, name, ": term\n")

    assert read_markdown(target) == ": term\n"


def test_read_markdown_rejects_other_extensions(tmp_path: Path):
    target = _write(tmp_path, "notes.txt", ": term\n")

    with pytest.raises(NotMarkdownError, match="is not a Markdown file") as excinfo:
        read_markdown(target)

    assert excinfo.value.path == target


def test_read_markdown_enforces_size_limit(tmp_path: Path):
    target = _write(tmp_path, "doc.md", "X" * 20)

    assert read_markdown(target, max_file_size=20) == "X" * 20
    with pytest.raises(FileTooLargeError) as excinfo:
        read_markdown(target, max_file_size=10)

    assert isinstance(excinfo.value, RenderError)
    assert excinfo.value.limit == 10
    assert str(excinfo.value) == f"{target} exceeds the maximum allowed size of 10 bytes."


def test_read_markdown_missing_file(tmp_path: Path):
    with pytest.raises(RenderError, match="Error accessing"):
        read_markdown(tmp_path / "missing.md")


def test_read_markdown_rejects_directory(tmp_path: Path):
    directory = tmp_path / "docs.md"
    directory.mkdir()

    with pytest.raises(RenderError, match="Error reading"):
        read_markdown(directory)


def test_read_markdown_rejects_invalid_utf8(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_bytes(b"\xff\xfe")

    with pytest.raises(RenderError, match="Invalid UTF-8 sequence"):
        read_markdown(target)


def test_render_file(tmp_path: Path):
    target = _write(tmp_path, "doc.md", ": term\n    : desc\n")

    assert render_file(target) == "<dl>\n<dt>term</dt>\n<dd>desc</dd>\n</dl>\n"


@pytest.mark.parametrize(
    ("name", "content", "message"),
    [
        ("doc.md", ": term\n    : desc\n", "maximum allowed size"),
        ("doc.txt", ": t\n", "is not a Markdown file"),
    ],
)
def test_render_file_wraps_read_errors(tmp_path: Path, name: str, content: str, message: str):
    target = _write(tmp_path, name, content)

    with pytest.raises(RenderFileError, match=message):
        render_file(target, max_file_size=5)


def test_write_output_replaces_existing_file(tmp_path: Path):
    destination = tmp_path / "out.html"
    destination.write_text("old", encoding="utf-8")

    write_output(destination, "<dl></dl>\n")

    assert destination.read_text(encoding="utf-8") == "<dl></dl>\n"
    assert [path.name for path in tmp_path.iterdir()] == ["out.html"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="Symlink support is required")
def test_write_output_refuses_symlink(tmp_path: Path):
    real = _write(tmp_path, "real.html", "keep")
    link = tmp_path / "link.html"
    try:
        os.symlink(real, link)
    except OSError as error:  # pragma: no cover - platform dependent
        pytest.skip(f"Unable to create symlink: {error}")

    with pytest.raises(IOError, match="symlink"):
        write_output(link, "new")

    assert real.read_text(encoding="utf-8") == "keep"


def test_write_output_reports_missing_directory(tmp_path: Path):
    with pytest.raises(IOError, match="Error writing"):
        write_output(tmp_path / "missing" / "out.html", "content")
