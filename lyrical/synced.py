"""Parse synced (LRC-style) lyrics into timed lines.

Synced lyrics from LRCLIB have one lyric per line, each starting with a
timestamp in the form [mm:ss.xx]:

    [00:17.87]Wettin you want
    [00:19.52]I go give you

Lines that don't start with such a timestamp (metadata tags, comments,
blank lines) are skipped.
"""

import bisect
import logging
import re

from .exceptions import NoSyncedLyricsError
from .models import LyricLine, LyricSearchResult

logger = logging.getLogger(__name__)

# Shown for timestamped lines without words (instrumental breaks)
INTERLUDE_MARKER = "♪"

_LRC_LINE = re.compile(r"\[([0-9]{2}):([0-9]{2}\.[0-9]{2})\](.*)")
_LINE_BREAKS = re.compile(r"[\r\n\u2028\u2029]+")


def parse_lrc_timestamp(line: str) -> tuple[float, str] | None:
    """Split one synced line into (start seconds, text).

    Returns None if the line doesn't start with a [mm:ss.xx] timestamp.
    """
    match = _LRC_LINE.fullmatch(line)
    if not match:
        return None

    minutes, seconds, rest = match.groups()
    start = int(minutes) * 60 + float(seconds)

    text = rest.strip()
    if not text:
        text = INTERLUDE_MARKER
    else:
        text = _LINE_BREAKS.sub(" ", text)
    return start, text


def parse_synced_lyrics(lyrics: LyricSearchResult) -> list[LyricLine]:
    """Parse a result's synced lyrics into LyricLine objects.

    Each line ends where the next one starts. The last line ends at the
    track duration, even if that is earlier than its start.

    Args:
        lyrics: A search result with synced lyrics.

    Returns:
        Lines in the order they appear in the text. Empty if no line has a
        valid timestamp.

    Raises:
        NoSyncedLyricsError: The result has no synced lyrics.
    """
    if not lyrics.synced_lyrics:
        raise NoSyncedLyricsError("No synced lyrics available for this song")

    entries = []
    for raw in lyrics.synced_lyrics.split("\n"):
        if not raw.strip():
            continue
        parsed = parse_lrc_timestamp(raw)
        if parsed is None:
            continue
        entries.append(parsed)

    lines = []
    for i, (start, text) in enumerate(entries):
        end = entries[i + 1][0] if i + 1 < len(entries) else lyrics.duration
        lines.append(LyricLine(start=start, end=end, text=text))

    logger.debug("Parsed %d synced lines for id=%s", len(lines), lyrics.id)
    return lines


def line_at(lines: list[LyricLine], position: float) -> LyricLine | None:
    """Return the line being sung at `position` seconds, or None.

    `lines` should be in chronological order, as parse_synced_lyrics returns
    them for well-formed lyrics.
    """
    starts = [line.start for line in lines]
    i = bisect.bisect_right(starts, position) - 1
    if i < 0:
        return None
    line = lines[i]
    if position >= line.end:
        return None
    return line
