"""Chord-line classification.

A word is *chord-shaped* when the whole word matches::

    ROOT [#|b] SUFFIX* [EXTENSION] [/ ROOT [#|b]]

where ROOT is an uppercase A-G, SUFFIX is any run of ``maj``, ``min``,
``dim``, ``aug``, ``sus``, ``add``, ``m`` or ``M``, and EXTENSION is a single
digit or ``11``/``13``.  Bass notes carry no suffix.

A line is a chord line when more than half of its words are chord-shaped.
"""

import re

CHORD_WORD_RE = re.compile(
    r"[A-G][#b]?"
    r"(?:maj|min|dim|aug|sus|add|m|M)*"
    r"(?:11|13|[0-9])?"
    r"(?:/[A-G][#b]?)?"
)

# A line made only of [token] groups: "[G]  [C]", "[Chorus]"
FULLY_BRACKETED_RE = re.compile(r"^\s*(?:\[[^\[\]]*\]\s*)+$")


def is_chord_word(word: str) -> bool:
    """Return True if *word* is chord-shaped (``Am7``, ``D/F#``, ``Bbmaj7``)."""
    return CHORD_WORD_RE.fullmatch(word) is not None


def is_chord_line(line: str) -> bool:
    """Return True if more than half of the words on *line* are chord-shaped.

    Blank lines are never chord lines.
    """
    words = line.split()
    if not words:
        return False
    chords = sum(1 for word in words if is_chord_word(word))
    return chords * 2 > len(words)


def is_fully_bracketed(line: str) -> bool:
    """Return True if every non-space character of *line* sits inside ``[...]``."""
    return FULLY_BRACKETED_RE.match(line) is not None
