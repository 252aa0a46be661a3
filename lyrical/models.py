"""Data types shared by the lyrics client, the selector and the synced-lyrics parser."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LyricSearchResult:
    """One LRCLIB search result.

    Attributes:
        id: LRCLIB track ID.
        name: Display name of the entry (usually the track name).
        track_name: Track title.
        artist_name: Artist name.
        album_name: Album name.
        duration: Track duration in seconds (may be fractional, or 0 when unknown).
        instrumental: Whether the track is instrumental.
        plain_lyrics: Unformatted lyrics text (or None).
        synced_lyrics: Lyrics where each line starts with a [mm:ss.xx] timestamp (or None).
    """

    id: int | None
    name: str
    track_name: str
    artist_name: str
    album_name: str
    duration: float
    instrumental: bool = False
    plain_lyrics: str | None = None
    synced_lyrics: str | None = None

    @classmethod
    def from_api(cls, item: dict) -> "LyricSearchResult":
        """Build a result from a raw LRCLIB API response item."""
        track_name = item.get("trackName") or ""
        return cls(
            id=item.get("id"),
            name=item.get("name") or track_name,
            track_name=track_name,
            artist_name=item.get("artistName") or "",
            album_name=item.get("albumName") or "",
            duration=float(item.get("duration") or 0),
            instrumental=bool(item.get("instrumental", False)),
            plain_lyrics=item.get("plainLyrics"),
            synced_lyrics=item.get("syncedLyrics"),
        )

    @property
    def has_synced_lyrics(self) -> bool:
        return bool(self.synced_lyrics)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class LyricLine:
    """A lyric line with its display interval.

    `start` is inclusive and `end` is exclusive, both in seconds. `end` is the
    next line's start, or the track duration for the last line.
    """

    start: float
    end: float
    text: str

    def to_dict(self) -> dict:
        return asdict(self)
