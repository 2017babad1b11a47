from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

import dl_markdown.cli as cli_module
from dl_markdown.cli import cli


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def _error_text(result) -> str:
    """Return combined stdout and exception text for assertions."""
    return f"{result.output}{result.exception}"


def test_cli_prints_html(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "glossary.md",
        """
        # Glossary

        : term
            : desc
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == "<h1>Glossary</h1>\n<dl>\n<dt>term</dt>\n<dd>desc</dd>\n</dl>\n"


def test_cli_writes_output_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "glossary.md",
        """
        : term
            : desc
        """,
    )
    destination = tmp_path / "glossary.html"

    result = cli_runner.invoke(cli, [str(target), "--output", str(destination)])

    assert result.exit_code == 0
    assert result.output == ""
    assert "<dd>desc</dd>" in destination.read_text(encoding="utf-8")
    assert sorted(path.name for path in tmp_path.iterdir()) == ["glossary.html", "glossary.md"]


def test_cli_description_indent_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "doc.md",
        """
        : term
          : desc
        """,
    )

    result = cli_runner.invoke(cli, ["--description-indent", "2", str(target)])

    assert result.exit_code == 0
    assert "<dd>desc</dd>" in result.output


def test_cli_allow_term_only(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "doc.md",
        """
        : term
        Still text.
        """,
    )

    default = cli_runner.invoke(cli, [str(target)])
    relaxed = cli_runner.invoke(cli, ["--allow-term-only", str(target)])

    assert "<dl>" not in default.output
    assert "<dt>term</dt>" in relaxed.output
    assert "<p>Still text.</p>" in relaxed.output


def test_cli_accepts_no_break_on_blank_line(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "doc.md",
        """
        : a
            : d

        : b
            : e
        """,
    )

    result = cli_runner.invoke(cli, ["--no-break-on-blank-line", str(target)])

    assert result.exit_code == 0
    assert result.output.count("<dl>") == 2


def test_cli_reads_config_from_pyproject(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.dl-markdown]
        description_indent = 2
        """,
    )
    target = _write(
        tmp_path,
        "doc.md",
        """
        : term
          : desc
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert "<dd>desc</dd>" in result.output


def test_cli_flags_override_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.dl-markdown]
        description_indent = 2
        """,
    )
    target = _write(
        tmp_path,
        "doc.md",
        """
        : term
              : desc
        """,
    )

    result = cli_runner.invoke(cli, ["--description-indent", "6", str(target)])

    assert result.exit_code == 0
    assert "<dd>desc</dd>" in result.output


def test_cli_rejects_invalid_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.dl-markdown]
        indent = 2
        """,
    )
    target = _write(tmp_path, "doc.md", ": term\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 2
    assert "known keys" in result.output


def test_cli_rejects_non_markdown_files(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "notes.txt", ": term\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "is not a Markdown file" in result.output


def test_cli_rejects_invalid_utf8(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "broken.md"
    target.write_bytes(b": term\n    : \xff\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "Invalid UTF-8 sequence" in result.output


def test_file_size_limit_enforced(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DL_MARKDOWN_MAX_FILE_SIZE", "10")
    target = tmp_path / "large.md"
    target.write_text("X" * 20, encoding="utf-8")

    result = cli_runner.invoke(cli_module.cli, [str(target)])
    assert result.exit_code != 0
    assert "maximum allowed size" in _error_text(result)


def test_max_file_size_option_overrides_env(cli_runner, tmp_path, monkeypatch):
    monkeypatch.setenv("DL_MARKDOWN_MAX_FILE_SIZE", "5")
    target = _write(tmp_path, "doc.md", ": term\n    : desc\n")

    result = cli_runner.invoke(cli, ["--max-file-size", "1024", str(target)])

    assert result.exit_code == 0
    assert "<dt>term</dt>" in result.output


def test_cli_renders_files_outside_working_directory(cli_runner, tmp_path, monkeypatch):
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    target = _write(tmp_path, "doc.md", ": term\n    : desc\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert "<dd>desc</dd>" in result.output


@pytest.mark.parametrize("value", ["big", "0"])
def test_invalid_file_size_env_reported(cli_runner, tmp_path, monkeypatch, value):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DL_MARKDOWN_MAX_FILE_SIZE", value)
    target = _write(tmp_path, "doc.md", ": term\n")

    result = cli_runner.invoke(cli_module.cli, [str(target)])
    assert result.exit_code == 2
    assert "max-file-size" in result.output
