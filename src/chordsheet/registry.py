from .adapters.base import SongSource
from .adapters.lacuerda import LaCuerdaAdapter
from .exceptions import UnsupportedSiteError

_ADAPTERS: list[type[SongSource]] = [
    LaCuerdaAdapter,
]


def get_adapter(url: str) -> SongSource:
    """Return an instantiated adapter for the given URL.

    Raises UnsupportedSiteError if no adapter matches.
    """
    for cls in _ADAPTERS:
        if cls.can_handle(url):
            return cls()
    raise UnsupportedSiteError(url)
