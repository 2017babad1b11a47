"""
Renders a Markdown file with colon definition lists to HTML.
The HTML goes to stdout, or to the file given with ``--output``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, build_config
from .constants import DEFAULT_MAX_FILE_SIZE
from .filesystem import write_output
from .renderer import RenderFileError, render_file

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="dl-markdown")
@click.option(
    "--description-indent",
    type=float,
    help="Columns between a term marker and its description markers (1-12).",
)
@click.option(
    "--require-description/--allow-term-only",
    default=None,
    help="Only accept terms without descriptions before a blank line, the end, or another term.",
)
@click.option(
    "--break-on-blank-line/--no-break-on-blank-line",
    default=None,
    help="End a definition list at the first blank line after an item.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write HTML to this file instead of stdout.",
)
@click.option(
    "--max-file-size",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_FILE_SIZE,
    envvar="DL_MARKDOWN_MAX_FILE_SIZE",
    show_envvar=True,
    help="Largest accepted input file, in bytes.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages to stderr.")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def cli(
    filepath: Path,
    description_indent: float | None = None,
    require_description: bool | None = None,
    break_on_blank_line: bool | None = None,
    output: str | None = None,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    verbose: bool = False,
):
    """
    Entry point for rendering a Markdown file to HTML.

    Args:
        filepath: Path to the Markdown file to render.
        description_indent: Override for the description indent; clamped to 1-12.
        require_description: Override for term-only item handling.
        break_on_blank_line: Override for blank-line list termination.
        output: Optional destination file for the HTML.
        max_file_size: Largest accepted input file in bytes.
        verbose: Enable debug logging.

    Returns:
        None.

    Raises:
        click.BadParameter: If the configuration file is malformed.
        click.ClickException: If the file is not Markdown, cannot be read, is
            too large, or the output cannot be written.

    Examples:
        dl-markdown glossary.md --description-indent 2 -o glossary.html
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = build_config(
            filepath.resolve().parent,
            description_indent=description_indent,
            require_description=require_description,
            break_on_blank_line=break_on_blank_line,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        html = render_file(filepath, config, max_file_size)
    except RenderFileError as error:
        raise click.ClickException(str(error)) from error

    if output is None:
        click.echo(html, nl=False)
        return

    try:
        write_output(Path(output), html)
    except IOError as error:
        raise click.ClickException(str(error)) from error


if __name__ == "__main__":
    cli()
