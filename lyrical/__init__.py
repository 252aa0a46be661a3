"""Lyrical - look up song lyrics on LRCLIB and turn synced lyrics into timed lines.

Basic usage:
    >>> from lyrical import LyricalClient
    >>> with LyricalClient() as client:
    ...     lines = client.get_lyric_lines("Circles", "Post Malone", duration=215)
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidArgumentError,
    LyricalError,
    LyricsFetchError,
    LyricsNotFoundError,
    NoSyncedLyricsError,
    SyncedLyricsNotFoundError,
)
from .lyrics_client import (
    LrclibSearchProvider,
    LyricalClient,
    SearchProvider,
    get_lyric_lines,
    get_lyrics,
    search_lyrics,
)
from .models import LyricLine, LyricSearchResult
from .selection import filter_synced, select_lyrics
from .synced import INTERLUDE_MARKER, line_at, parse_synced_lyrics

__all__ = [
    "INTERLUDE_MARKER",
    "InvalidArgumentError",
    "LrclibSearchProvider",
    "LyricLine",
    "LyricSearchResult",
    "LyricalClient",
    "LyricalError",
    "LyricsFetchError",
    "LyricsNotFoundError",
    "NoSyncedLyricsError",
    "SearchProvider",
    "SyncedLyricsNotFoundError",
    "filter_synced",
    "get_lyric_lines",
    "get_lyrics",
    "line_at",
    "parse_synced_lyrics",
    "search_lyrics",
    "select_lyrics",
]
