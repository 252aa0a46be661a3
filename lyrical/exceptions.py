"""Exceptions raised by Lyrical."""


class LyricalError(Exception):
    """Base exception for Lyrical."""
    pass


class InvalidArgumentError(LyricalError, ValueError):
    """A caller-supplied argument (e.g. the track duration) is not usable."""
    pass


class LyricsNotFoundError(LyricalError):
    """No lyrics matched the search."""
    pass


class SyncedLyricsNotFoundError(LyricsNotFoundError):
    """Lyrics were found, but none of them carry synced (timestamped) lines."""
    pass


class LyricsFetchError(LyricsNotFoundError):
    """The lyrics database could not be reached or answered with an error."""
    pass


class NoSyncedLyricsError(LyricalError):
    """A lyrics record has no synced lyrics to parse."""
    pass
