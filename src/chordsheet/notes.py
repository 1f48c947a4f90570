"""Pitch-class tables and note spelling.

Notes are indexed 0-11 with C=0.  Every accepted spelling (the twelve sharp
names plus Db, Eb, Gb, Ab, Bb) maps to exactly one index; anything else
(Cb, E#, double accidentals, lowercase) is rejected with ``None``.

Spelling after a shift
----------------------

The spelling of a black key depends only on ``offset mod 12``:

+-------------------+------------------------------------+
| Shift (mod 12)    | Black-key names                    |
+===================+====================================+
| 1-6  ("up")       | C#  D#  F#  G#  A#                 |
+-------------------+------------------------------------+
| 7-11 ("down")     | C#  Eb  F#  G#  Bb                 |
+-------------------+------------------------------------+
"""

from types import MappingProxyType

NOTES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

FLAT_TO_SHARP = MappingProxyType({
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
})

# Conventional spelling used when moving down.
_DOWN_NAMES = MappingProxyType({
    "D#": "Eb",
    "A#": "Bb",
})

_NOTE_TO_INDEX = MappingProxyType({
    **{name: i for i, name in enumerate(NOTES)},
    **{flat: NOTES.index(sharp) for flat, sharp in FLAT_TO_SHARP.items()},
})


def note_index(note: str) -> int | None:
    """Return the pitch class (0-11) for *note*, or ``None`` if unrecognised."""
    return _NOTE_TO_INDEX.get(note)


def is_downward(offset: int) -> bool:
    """True when a shift of *offset* semitones is spelled as a move down."""
    return offset % 12 > 6


def note_name(index: int, offset: int = 0) -> str:
    """Spell pitch class *index* for a shift of *offset* semitones."""
    name = NOTES[index % 12]
    if is_downward(offset):
        return _DOWN_NAMES.get(name, name)
    return name


def shift_note(note: str, offset: int) -> str | None:
    """Move *note* by *offset* semitones and re-spell it.

    Returns ``None`` if *note* is not a recognised spelling.
    """
    index = note_index(note)
    if index is None:
        return None
    return note_name(index + offset, offset)


def key_offset(from_key: str, to_key: str) -> int | None:
    """Return the shortest signed shift (-5..6) that turns *from_key* into *to_key*."""
    start = note_index(from_key)
    end = note_index(to_key)
    if start is None or end is None:
        return None
    diff = (end - start) % 12
    return diff - 12 if diff > 6 else diff


def transposed_key(key: str, offset: int) -> str | None:
    """Return the key that *key* becomes after shifting by *offset*."""
    if offset % 12 == 0:
        return key if note_index(key) is not None else None
    return shift_note(key, offset)
