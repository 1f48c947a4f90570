class ChordsheetError(Exception):
    """Base exception for chordsheet."""


class FetchError(ChordsheetError):
    """Raised when an HTTP request fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class ParseError(ChordsheetError):
    """Raised when a song sheet cannot be found in a fetched page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Parse error for {url}: {reason}")


class UnsupportedSiteError(ChordsheetError):
    """Raised when no adapter matches the given URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No adapter found for URL: {url}")


class SessionError(ChordsheetError):
    """Raised when a live session is asked to do something it cannot."""
