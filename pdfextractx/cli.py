"""
Command-line interface for pdfextractx.
"""

import functools
import logging
import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdfextractx import __version__
from pdfextractx.config import load_ligature_table, load_options
from pdfextractx.document import PdfExtractDocument
from pdfextractx.exceptions import PdfExtractError, PositionNotFoundError
from pdfextractx.position_map import ConflictPolicy
from pdfextractx.utils import format_index_range, get_logger

console = Console()

POLICY_CHOICES = [policy.value for policy in ConflictPolicy]


def _fail(message):
    console.print(f"[bold red]✗ Error:[/bold red] {escape(str(message))}")
    sys.exit(1)


def document_options(func):
    """Options shared by every command that loads a dump."""

    @click.argument('dump', type=click.Path(exists=True, dir_okay=False))
    @click.option(
        '--ligatures', '-l',
        default=None,
        help='JSON file mapping ligature glyphs to their expansion',
        type=click.Path(exists=True, dir_okay=False)
    )
    @click.option(
        '--config', '-c',
        default=None,
        help='JSON configuration file',
        type=click.Path(exists=True, dir_okay=False)
    )
    @click.option(
        '--policy',
        default=None,
        help='How colliding ligature positions are resolved',
        type=click.Choice(POLICY_CHOICES)
    )
    @functools.wraps(func)
    def wrapper(dump, ligatures, config, policy, **kwargs):
        try:
            options = load_options(
                config,
                ligatures=load_ligature_table(ligatures) if ligatures else None,
                conflict_policy=policy,
            )
            document = PdfExtractDocument.from_file(dump, options=options)
        except (PdfExtractError, ValueError, OSError) as e:
            _fail(e)
        return func(document, dump=dump, **kwargs)

    return wrapper


def _record_table(title, rows):
    table = Table(title=title)
    table.add_column("Offset", style="cyan", justify="right")
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Page", justify="right")
    table.add_column("Value", style="green")
    table.add_column("Display positions", style="dim")
    for offset, record in rows:
        table.add_row(
            str(offset),
            str(record.line_number),
            str(record.page),
            record.value,
            record.display_positions,
        )
    return table


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    pdfextractx - Map editor offsets to PDF extraction glyphs.
    """
    if verbose:
        get_logger("pdfextractx").setLevel(logging.DEBUG)


@cli.command(name="info")
@document_options
def show_info(document, dump):
    """
    Display a summary of an extraction dump.

    Example:

        pdfextractx info page.txt
    """
    summary = document.summary()

    info_table = Table(title="Extraction Summary", show_header=False)
    info_table.add_column("Property", style="cyan")
    info_table.add_column("Value", style="green")

    info_table.add_row("File", os.path.basename(dump))
    info_table.add_row("Records", str(summary.total_records))
    info_table.add_row("Content glyphs", str(summary.content_records))
    info_table.add_row("Draw operations", str(summary.draw_operations))
    info_table.add_row("Unmapped glyphs", str(summary.unmapped_glyphs))
    info_table.add_row("Pages", ", ".join(str(page) for page in summary.pages) or "-")
    info_table.add_row("Ligatures expanded", str(summary.ligatures))
    info_table.add_row("Content length", str(summary.content_length))
    info_table.add_row("Expanded length", str(summary.expanded_length))

    console.print(info_table)

    if document.ligature_matches:
        ligature_table = Table(title="Ligatures")
        ligature_table.add_column("Content offset", style="cyan", justify="right")
        ligature_table.add_column("Glyph", style="green")
        for match in document.ligature_matches:
            ligature_table.add_row(format_index_range(match.start, match.end - 1), match.keyword)
        console.print(ligature_table)


@cli.command(name="locate")
@document_options
@click.argument('offset', type=int)
@click.option(
    '--end', '-e',
    default=None,
    help='Inclusive end offset for a range lookup',
    type=int
)
def locate(document, dump, offset, end):
    """
    Show the extraction lines behind expanded-text offsets.

    Examples:

        pdfextractx locate page.txt 12

        pdfextractx locate page.txt 12 --end 20
    """
    last = offset if end is None else end
    try:
        records = document.lines_in_range(offset, last)
    except PositionNotFoundError as e:
        _fail(e)

    title = f"Offsets {format_index_range(offset, last)} in {os.path.basename(dump)}"
    console.print(_record_table(title, zip(range(offset, last + 1), records)))


@cli.command(name="offset")
@document_options
@click.argument('line', type=int)
def offset_of(document, dump, line):
    """
    Show the expanded-text offset produced by an extraction line.

    Example:

        pdfextractx offset page.txt 42
    """
    try:
        index = document.expanded_index_of(line)
    except PositionNotFoundError as e:
        _fail(e)

    console.print(f"[bold green]✓[/bold green] Line {line} → offset [bold]{index}[/bold]")


@cli.command(name="text")
@document_options
@click.option(
    '--view',
    type=click.Choice(['raw', 'content', 'expanded']),
    default='expanded',
    help='Which representation to print'
)
def show_text(document, dump, view):
    """
    Print the raw, content or ligature-expanded text of a dump.

    Example:

        pdfextractx text page.txt --view content
    """
    texts = {
        'raw': document.raw_text,
        'content': document.content,
        'expanded': document.expanded_content,
    }
    click.echo(texts[view])


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
