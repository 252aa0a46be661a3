"""Lyrics lookup client using the LRCLIB API.

LRCLIB (https://lrclib.net) is a free, open lyrics database.
No API key required, no documented rate limits. The project encourages
setting a User-Agent with app name and project URL.

Uses httpx instead of requests because lrclib.net's TLS configuration
is incompatible with urllib3/requests on some Python installations.
"""

import logging
from typing import Protocol

import httpx

from .config import get_lrclib_config
from .exceptions import LyricsFetchError, LyricsNotFoundError, SyncedLyricsNotFoundError
from .models import LyricLine, LyricSearchResult
from .selection import filter_synced, select_lyrics, validate_duration
from .synced import parse_synced_lyrics

logger = logging.getLogger(__name__)


class SearchProvider(Protocol):
    """Anything that can look up lyrics by track and artist name."""

    def find(self, track_name: str, artist_name: str) -> list[LyricSearchResult]:
        ...


class LrclibSearchProvider:
    """Search provider backed by LRCLIB's /api/search endpoint.

    Defaults for the API URL, User-Agent and timeout come from
    get_lrclib_config(). Pass `client` to reuse an existing httpx.Client;
    it won't be closed by close().
    """

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        if base_url is None or user_agent is None or timeout is None:
            config = get_lrclib_config()
            base_url = base_url or config["api_url"]
            user_agent = user_agent or config["user_agent"]
            timeout = timeout if timeout is not None else config["timeout"]
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client()

    def find(self, track_name: str, artist_name: str) -> list[LyricSearchResult]:
        """Search for lyrics by track and artist name.

        LRCLIB returns at most 20 results.

        Raises:
            LyricsFetchError: The request failed or LRCLIB returned an error status.
        """
        logger.debug("Searching LRCLIB for %r by %r", track_name, artist_name)
        try:
            resp = self._client.get(
                f"{self.base_url}/search",
                params={"track_name": track_name, "artist_name": artist_name},
                headers=self.headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise LyricsFetchError(
                f"Failed to fetch lyrics for {track_name} by {artist_name}: {e}"
            ) from e
        except ValueError as e:
            raise LyricsFetchError(
                f"LRCLIB returned invalid JSON for {track_name} by {artist_name}"
            ) from e

        if not isinstance(data, list):
            logger.warning("Unexpected LRCLIB search response type: %s", type(data).__name__)
            return []

        try:
            results = [LyricSearchResult.from_api(item) for item in data if isinstance(item, dict)]
        except (TypeError, ValueError) as e:
            raise LyricsFetchError(
                f"LRCLIB returned a malformed result for {track_name} by {artist_name}: {e}"
            ) from e
        logger.debug("LRCLIB returned %d results", len(results))
        return results

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class LyricalClient:
    """Look up lyrics, pick the best match and parse synced lines.

    Args:
        provider: Where search results come from. Defaults to a new
            LrclibSearchProvider, which the client closes on close().
    """

    def __init__(self, provider: SearchProvider | None = None):
        self._owns_provider = provider is None
        self.provider = provider if provider is not None else LrclibSearchProvider()

    def query_song_lyrics(
        self, song: str, artist: str, *, synced_only: bool = False
    ) -> list[LyricSearchResult]:
        """Search for lyrics of a song by its title and artist.

        Args:
            song: The title of the song.
            artist: The name of the artist.
            synced_only: Only return results that have synced lyrics. The
                filtered list may be empty.

        Returns:
            Search results in the order LRCLIB returned them.

        Raises:
            LyricsNotFoundError: The search returned nothing (or failed).
        """
        results = self.provider.find(song, artist)
        if not results:
            raise LyricsNotFoundError(f"No lyrics found for {song} by {artist}")

        if synced_only:
            return filter_synced(results)
        return results

    def get_lyrics(
        self,
        song: str,
        artist: str,
        *,
        duration: float | None = None,
        synced_only: bool = False,
    ) -> LyricSearchResult:
        """Get the closest matching lyrics for a song by title and artist.

        Args:
            song: The title of the song.
            artist: The name of the artist.
            duration: Optional duration of the song in seconds. If given, the
                result with the closest duration is returned; otherwise the
                first result.
            synced_only: Only consider results that have synced lyrics.

        Raises:
            InvalidArgumentError: duration is not a finite number.
            LyricsNotFoundError: Nothing matched (SyncedLyricsNotFoundError
                when results exist but none are synced).
        """
        validate_duration(duration)
        results = self.query_song_lyrics(song, artist)
        try:
            return select_lyrics(results, duration=duration, synced_only=synced_only)
        except SyncedLyricsNotFoundError as e:
            raise SyncedLyricsNotFoundError(f"No synced lyrics found for {song} by {artist}") from e

    def get_lyric_lines(
        self, song: str, artist: str, *, duration: float | None = None
    ) -> list[LyricLine]:
        """Get synced lyric lines for a song by title and artist.

        Always selects among results with synced lyrics.
        """
        lyrics = self.get_lyrics(song, artist, duration=duration, synced_only=True)
        return self.parse_synced_lyrics(lyrics)

    @staticmethod
    def parse_synced_lyrics(lyrics: LyricSearchResult) -> list[LyricLine]:
        """Parse synced lyrics from a search result. See synced.parse_synced_lyrics."""
        return parse_synced_lyrics(lyrics)

    def close(self) -> None:
        if self._owns_provider:
            self.provider.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def search_lyrics(track_name: str, artist_name: str, synced_only: bool = False) -> list[LyricSearchResult]:
    """Search LRCLIB for lyrics with a one-off client."""
    with LyricalClient() as client:
        return client.query_song_lyrics(track_name, artist_name, synced_only=synced_only)


def get_lyrics(
    track_name: str,
    artist_name: str,
    duration: float | None = None,
    synced_only: bool = False,
) -> LyricSearchResult:
    """Get the best matching lyrics from LRCLIB with a one-off client."""
    with LyricalClient() as client:
        return client.get_lyrics(track_name, artist_name, duration=duration, synced_only=synced_only)


def get_lyric_lines(track_name: str, artist_name: str, duration: float | None = None) -> list[LyricLine]:
    """Get parsed synced lyric lines from LRCLIB with a one-off client."""
    with LyricalClient() as client:
        return client.get_lyric_lines(track_name, artist_name, duration=duration)
