import sys
from pathlib import Path

import click

from .exceptions import FetchError, SourceError
from .parser import parse
from .registry import FORMATTERS, get_formatter
from .sources import STDIN, read_source


@click.command()
@click.argument("output_format", metavar="FORMAT", type=click.Choice(list(FORMATTERS)))
@click.argument("source", default=STDIN, required=False)
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
def main(output_format: str, source: str, output_path: str | None) -> None:
    """Convert a plain-text chords-over-lyrics song sheet.

    \b
    SOURCE is a file path, an http(s) URL, or "-" for stdin (the default).

    \b
    Formats:
      to-latex   LaTeX for the songs package
      to-html    preformatted HTML
      to-json    structural dump of the parsed song
    """
    # --- Read ---
    if source == STDIN:
        click.echo("Filename has been omitted, reading from stdin", err=True)
    else:
        click.echo(f"Reading plain song from {source}", err=True)

    try:
        content = read_source(source)
    except FetchError as exc:
        reason = f"server answered HTTP {exc.status_code}" if exc.status_code else "no response"
        click.echo(f"Error: Song sheet download from {exc.url} failed: {reason}", err=True)
        sys.exit(1)
    except SourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Parse + render ---
    song = parse(content)
    text = get_formatter(output_format).render(song)

    # --- Output ---
    if output_path is None:
        click.echo(text, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(text, encoding="utf-8")
    click.echo(f"Written to {dest}")
