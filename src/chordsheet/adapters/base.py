from abc import ABC, abstractmethod

from ..models import Song


class SongSource(ABC):
    """Abstract base class for all site-specific song importers."""

    @classmethod
    @abstractmethod
    def can_handle(cls, url: str) -> bool:
        """Return True if this adapter can handle the given URL."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """Fetch the page at url and return raw HTML.

        Raises FetchError on HTTP-level failures.
        """

    @abstractmethod
    def extract(self, html: str, url: str) -> Song:
        """Parse HTML and return a Song.

        Song.content is the sheet text as found on the page; whether chords
        get bracketed is up to the caller.

        Raises ParseError if expected content cannot be found.
        """

    def scrape(self, url: str) -> Song:
        """Convenience method: fetch + extract."""
        html = self.fetch(url)
        return self.extract(html, url)
