import logging
import re
import sys
from pathlib import Path

import click

from .annotator import annotate
from .exceptions import FetchError, ParseError, UnsupportedSiteError
from .notes import key_offset, transposed_key
from .registry import get_adapter
from .transposer import first_chord, transpose


def _slugify(text: str) -> str:
    """Convert a string to a lowercase hyphenated slug suitable for filenames."""
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)   # drop punctuation
    text = re.sub(r"[\s_]+", "-", text)     # spaces/underscores → hyphens
    text = re.sub(r"-{2,}", "-", text)      # collapse multiple hyphens
    return text.strip("-")


def _default_filename(artist: str, title: str) -> str:
    return f"{_slugify(artist)}-{_slugify(title)}.txt"


def _emit(text: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(text, nl=False)
        return
    Path(output_path).write_text(text, encoding="utf-8")
    click.echo(f"Written to {output_path}", err=True)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log parsing decisions to stderr.")
def main(verbose: bool) -> None:
    """Bracket and transpose chord sheets.

    \b
    Sheets use square brackets around chords, e.g.
      [C]Bless the Lord [G]oh my soul
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command("annotate")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
def annotate_cmd(source, output_path: str | None) -> None:
    """Wrap every chord in SOURCE in square brackets.

    Chord lines sitting above a lyric line are folded into the lyric.
    """
    _emit(annotate(source.read()), output_path)


@main.command("transpose")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--by", "offset", type=int, default=None, metavar="N",
              help="Shift every chord by N semitones (may be negative).")
@click.option("--to", "target_key", default=None, metavar="KEY",
              help="Shift so the first chord becomes KEY.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
def transpose_cmd(source, offset: int | None, target_key: str | None,
                  output_path: str | None) -> None:
    """Transpose the bracketed chords in SOURCE."""
    if (offset is None) == (target_key is None):
        _fail("give exactly one of --by or --to")

    text = source.read()
    if target_key is not None:
        original = first_chord(text)
        if original is None:
            _fail("no chords found to take a key from")
        offset = key_offset(original, target_key)
        if offset is None:
            _fail(f"not a note name: {target_key}")

    _emit(transpose(text, offset), output_path)


@main.command("key")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--by", "offset", type=int, default=0, show_default=True, metavar="N",
              help="Report the key after shifting by N semitones.")
def key_cmd(source, offset: int) -> None:
    """Print the key of SOURCE (its first chord)."""
    original = first_chord(source.read())
    if original is None:
        _fail("no chords found")
    click.echo(transposed_key(original, offset))


@main.command("import")
@click.argument("url")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <artist>-<title>.txt)")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
@click.option("--raw", is_flag=True, default=False,
              help="Keep the sheet as found; do not bracket chords.")
def import_cmd(url: str, output_path: str | None, stdout: bool, raw: bool) -> None:
    """Import a song sheet from a supported chord site.

    \b
    Supported sites:
      - lacuerda.net
    """
    # --- Resolve adapter ---
    try:
        adapter = get_adapter(url)
    except UnsupportedSiteError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo("Supported sites: lacuerda.net", err=True)
        sys.exit(1)

    # --- Fetch + parse ---
    try:
        song = adapter.scrape(url)
    except FetchError as exc:
        msg = f"Error: Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        if exc.status_code == 403:
            msg += "; the site is blocking automated requests"
        click.echo(msg, err=True)
        sys.exit(1)
    except ParseError as exc:
        _fail(str(exc))

    text = song.content if raw else annotate(song.content)

    # --- Output ---
    if stdout:
        click.echo(text, nl=False)
        return

    dest = Path(output_path) if output_path else Path(_default_filename(song.artist, song.title))
    dest.write_text(text, encoding="utf-8")
    click.echo(f"Written to {dest}")
