"""Adapter for lacuerda.net chord pages.

URL pattern: acordes.lacuerda.net/<artist-slug>/<song-slug>

Page structure:
    <div id="_titulo">Song Title</div>
    <div id="_artista"><a href="...">Artist</a></div>
    <pre id="_ce" class="ce">
        <a>C#m7</a>        <a>F#7</a>      ← chord links, stripped to text
    Él es Jesús Hijo de Dios
    </pre>

Chord notation: unbracketed, space-aligned above lyrics.  The sheet is
returned exactly as it appears in the <pre>; run it through
:func:`~chordsheet.annotator.annotate` to bracket the chords.
"""

import logging

import httpx
from bs4 import BeautifulSoup

from ..exceptions import FetchError, ParseError
from ..models import Song
from .base import SongSource

log = logging.getLogger(__name__)

_UNKNOWN_TITLE = "Unknown Title"
_UNKNOWN_ARTIST = "Unknown Artist"


class LaCuerdaAdapter(SongSource):
    """Adapter for lacuerda.net chord pages."""

    @classmethod
    def can_handle(cls, url: str) -> bool:
        return "lacuerda.net/" in url

    def fetch(self, url: str) -> str:
        try:
            resp = httpx.get(url, follow_redirects=True, timeout=15)
        except httpx.RequestError as exc:
            raise FetchError(url, 0) from exc
        if resp.status_code != 200:
            raise FetchError(url, resp.status_code)
        return resp.text

    def extract(self, html: str, url: str) -> Song:
        soup = BeautifulSoup(html, "html.parser")

        sheet = soup.find("pre", id="_ce")
        if not sheet:
            raise ParseError(url, "Could not find chord information on the page (<pre id='_ce'>)")

        # get_text() drops the <a> wrappers around chords and decodes entities
        content = sheet.get_text()
        if not content.strip():
            raise ParseError(url, "Chord sheet is empty")

        title = _text_of(soup, "_titulo") or _UNKNOWN_TITLE
        artist = _text_of(soup, "_artista") or _UNKNOWN_ARTIST
        log.debug("extracted %r by %r (%d lines)", title, artist, content.count("\n") + 1)

        return Song(title=title, artist=artist, content=content, source_url=url)


def _text_of(soup: BeautifulSoup, element_id: str) -> str:
    element = soup.find("div", id=element_id)
    return element.get_text(strip=True) if element else ""
