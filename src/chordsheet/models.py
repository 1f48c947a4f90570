from dataclasses import dataclass

from .notes import shift_note


@dataclass(frozen=True)
class Chord:
    """A chord symbol split into root, verbatim suffix and optional bass.

    Example: ``Am7/G`` -> ``Chord(root="A", suffix="m7", bass="G")``.
    """

    root: str
    suffix: str = ""
    bass: str | None = None

    def transposed(self, offset: int) -> "Chord":
        """Return a copy with root and bass moved by *offset* semitones.

        The suffix is never touched.  Unknown note spellings are kept as-is.
        """
        root = shift_note(self.root, offset) or self.root
        bass = None
        if self.bass is not None:
            bass = shift_note(self.bass, offset) or self.bass
        return Chord(root=root, suffix=self.suffix, bass=bass)

    def __str__(self) -> str:
        text = self.root + self.suffix
        if self.bass is not None:
            text += "/" + self.bass
        return text


@dataclass
class Song:
    """A song sheet as stored by the app.

    ``content`` holds the annotated text, e.g.
    "I [D]pulled into Nazareth, was feelin' about [G]half past [D]dead".
    """

    title: str
    artist: str
    content: str = ""
    source_url: str = ""
