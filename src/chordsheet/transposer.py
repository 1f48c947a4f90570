"""Transposition of bracketed chord text.

Every ``[...]`` span whose content parses as a chord is rewritten with its
root (and slash bass) moved by the requested number of semitones.  All other
text, including non-chord spans such as ``[Chorus]``, is left byte-for-byte
identical.

The offset passed in is always the total shift from the stored text, never a
delta from a previous call.
"""

import re

from .models import Chord
from .notes import note_index

# Any [token] group regardless of content; spans never nest.
CHORD_SPAN_RE = re.compile(r"\[([^\[\]]*)\]")

# Quality/extension text kept verbatim after the root.  Restricted to chord
# vocabulary so labels like "Chorus" or "Bridge" do not parse as C/B chords.
_SUFFIX_PAT = r"(?:maj|min|dim|aug|sus|add|alt|omit|no|m|M|[0-9]|[#b+\-()°ø^])*"

CHORD_RE = re.compile(
    r"(?P<root>[A-G][#b]?)"
    r"(?P<suffix>" + _SUFFIX_PAT + r")"
    r"(?:/(?P<bass>[A-G][#b]?))?"
)


def parse_chord(text: str) -> Chord | None:
    """Parse *text* (without brackets) into a :class:`~chordsheet.models.Chord`.

    Returns ``None`` if *text* is not a chord or names a note outside the
    accepted spellings (``Cb``, ``E#``).
    """
    m = CHORD_RE.fullmatch(text)
    if not m:
        return None
    root, suffix, bass = m.group("root", "suffix", "bass")
    if note_index(root) is None:
        return None
    if bass is not None and note_index(bass) is None:
        return None
    return Chord(root=root, suffix=suffix, bass=bass)


def transpose_chord(text: str, offset: int) -> str:
    """Return chord *text* moved by *offset* semitones, or *text* if it is not a chord."""
    chord = parse_chord(text)
    if chord is None:
        return text
    return str(chord.transposed(offset))


def transpose(annotated_text: str, offset: int) -> str:
    """Shift every bracketed chord in *annotated_text* by *offset* semitones.

    A shift that is a whole number of octaves returns the text unchanged.
    """
    if offset % 12 == 0:
        return annotated_text

    def _replace(m: re.Match) -> str:
        chord = parse_chord(m.group(1))
        if chord is None:
            return m.group(0)
        return f"[{chord.transposed(offset)}]"

    return CHORD_SPAN_RE.sub(_replace, annotated_text)


def first_chord(text: str) -> str | None:
    """Return the root of the first bracketed chord in *text*.

    This is the song's key as the app displays it; there is no real key
    detection.  Non-chord spans are skipped.
    """
    for m in CHORD_SPAN_RE.finditer(text):
        chord = parse_chord(m.group(1))
        if chord is not None:
            return chord.root
    return None
