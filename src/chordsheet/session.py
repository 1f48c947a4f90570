"""Live playlist sessions.

A session walks through a playlist one song at a time while everyone
watching sees the current song at the session's transpose offset.  The
offset belongs to the session, not the song, and goes back to 0 whenever the
current song changes.
"""

import logging
from dataclasses import dataclass, field

from .exceptions import SessionError
from .notes import key_offset, note_index, transposed_key
from .transposer import first_chord, transpose

log = logging.getLogger(__name__)


@dataclass
class PlaylistSession:
    """Current song pointer and transpose offset for one playlist."""

    song_ids: list[str] = field(default_factory=list)
    current_song_id: str | None = None
    transpose: int = 0
    active: bool = False

    def start(self) -> None:
        """Activate the session on the first song of the playlist."""
        self.active = True
        self.current_song_id = self.song_ids[0] if self.song_ids else None
        self.transpose = 0
        log.debug("session started on %s", self.current_song_id)

    def stop(self) -> None:
        self.active = False
        self.transpose = 0
        log.debug("session stopped")

    def select(self, song_id: str) -> None:
        """Make *song_id* the current song and reset the offset."""
        if song_id not in self.song_ids:
            raise SessionError(f"Song {song_id!r} is not in this playlist")
        self._move_to(song_id)

    def next_song(self) -> None:
        """Advance to the next song, wrapping to the first after the last."""
        self._step(1)

    def previous_song(self) -> None:
        """Go back one song, wrapping to the last before the first."""
        self._step(-1)

    def shift(self, amount: int) -> int:
        """Add *amount* semitones to the stored offset and return the new total."""
        self.transpose += amount
        return self.transpose

    def set_key(self, sheet: str, key: str) -> int:
        """Set the offset so that *sheet* is displayed in *key*.

        The sheet's key is its first chord.  Returns the new offset.
        """
        original = first_chord(sheet)
        if original is None:
            raise SessionError("Song has no chords to take a key from")
        if note_index(key) is None:
            raise SessionError(f"Not a note name: {key!r}")
        self.transpose = key_offset(original, key)
        log.debug("key %s -> %s, transpose %d", original, key, self.transpose)
        return self.transpose

    def current_key(self, sheet: str) -> str | None:
        """Return the key *sheet* is displayed in at the current offset.

        The name follows the transposed chords, so after ``set_key(sheet, "A#")``
        a downward shift reports ``Bb``: same pitch, spelled as the sheet shows it.
        """
        original = first_chord(sheet)
        if original is None:
            return None
        return transposed_key(original, self.transpose)

    def render(self, sheet: str) -> str:
        """Return *sheet* as it should be displayed right now."""
        return transpose(sheet, self.transpose)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _step(self, direction: int) -> None:
        if not self.song_ids:
            return
        try:
            index = self.song_ids.index(self.current_song_id)
        except ValueError:
            index = -1 if direction > 0 else 0
        self._move_to(self.song_ids[(index + direction) % len(self.song_ids)])

    def _move_to(self, song_id: str) -> None:
        self.current_song_id = song_id
        self.transpose = 0
        log.debug("current song -> %s", song_id)
