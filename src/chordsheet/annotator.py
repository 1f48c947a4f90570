"""Chord annotation: raw pasted sheet -> bracketed chord text.

Implements the chord-above-lyric -> inline merge pipeline:

  1. extract_chords_with_offsets() -- (column, name) pairs from a chord line
  2. merge_chord_lyric_lines()     -- splice chords into the lyric line below
  3. wrap_chord_line()             -- bracket a chord line that has no lyric
  4. annotate()                    -- full pass over a sheet

Two layouts are handled::

    stacked                          standalone (intro, interlude)
    G        C                       C   G   Am   F
    Amazing grace how sweet

Lines that are not chord lines (lyrics, blank lines, section labels, text
that is already bracketed) are copied through untouched, as are the line
break characters between them.
"""

import logging
import re

from .classifier import is_chord_line, is_chord_word, is_fully_bracketed

log = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"(\r\n|\r|\n)")
_WORD_RE = re.compile(r"\S+")


def _split_lines(text: str) -> list[tuple[str, str]]:
    """Split *text* into ``(line, line_break)`` pairs.

    The last pair's break is ``""``; joining every pair gives back *text*.
    """
    parts = _NEWLINE_RE.split(text)
    lines = parts[0::2]
    breaks = parts[1::2] + [""]
    return list(zip(lines, breaks))


def _is_lyric_row(line: str) -> bool:
    return bool(line.strip()) and not is_chord_line(line) and not is_fully_bracketed(line)


def _is_pure_chord_row(line: str) -> bool:
    """True when every word on *line* is chord-shaped, so folding it loses nothing."""
    return len(extract_chords_with_offsets(line)) == len(line.split())


def extract_chords_with_offsets(line: str) -> list[tuple[int, str]]:
    """Return ``(column, chord)`` pairs for every chord-shaped word on *line*.

    Columns are the start index of the word in *line*, left to right.  Words
    that are not chord-shaped (``|``, ``x2``, ``(Intro)``) are ignored.
    """
    return [(m.start(), m.group()) for m in _WORD_RE.finditer(line) if is_chord_word(m.group())]


def merge_chord_lyric_lines(chord_line: str, lyric_line: str) -> str:
    """Insert the chords of *chord_line* into *lyric_line* at their columns.

    Chords are spliced right to left so earlier insertions never move the
    columns of chords still waiting to be placed.  Chords that sit past the
    end of the lyric are appended, each after a single space.

    Example::

        chord_line = "  D                      G"
        lyric_line = "I pulled into Nazareth, was feelin'"
        result     = "I [D]pulled into Nazareth, w[G]as feelin'"
    """
    chords = extract_chords_with_offsets(chord_line)
    if not chords:
        return lyric_line

    width = len(lyric_line)
    inside = [(col, name) for col, name in chords if col <= width]
    overflow = [name for col, name in chords if col > width]

    result = lyric_line
    for col, name in reversed(inside):
        result = f"{result[:col]}[{name}]{result[col:]}"
    for name in overflow:
        result += f" [{name}]"
    return result


def wrap_chord_line(line: str) -> str:
    """Bracket each chord-shaped word of *line*, keeping all spacing."""

    def _wrap(m: re.Match) -> str:
        word = m.group()
        return f"[{word}]" if is_chord_word(word) else word

    return _WORD_RE.sub(_wrap, line)


def annotate(raw_text: str) -> str:
    """Return *raw_text* with every chord wrapped in square brackets.

    A chord line made only of chords and sitting directly above a lyric line
    is folded into that lyric line and disappears.  Any other chord line
    (one carrying words such as ``x2`` or ``Am7b5``, or one followed by
    another chord line, a blank line, a bracketed line or the end of the
    text) is bracketed in place.  Every other line is emitted verbatim.
    """
    lines = _split_lines(raw_text)
    out: list[str] = []

    i = 0
    while i < len(lines):
        line, brk = lines[i]

        if is_fully_bracketed(line) or not is_chord_line(line):
            out.append(line + brk)
            i += 1
            continue

        if (
            i + 1 < len(lines)
            and _is_lyric_row(lines[i + 1][0])
            and _is_pure_chord_row(line)
        ):
            lyric, lyric_brk = lines[i + 1]
            log.debug("line %d: chord row over lyric %r", i + 1, lyric)
            out.append(merge_chord_lyric_lines(line, lyric) + lyric_brk)
            i += 2
            continue

        log.debug("line %d: standalone chord line %r", i + 1, line)
        out.append(wrap_chord_line(line) + brk)
        i += 1

    return "".join(out)
