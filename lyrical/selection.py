"""Pick the best lyrics record out of a list of search results."""

import logging
import math
from numbers import Real

from .exceptions import InvalidArgumentError, LyricsNotFoundError, SyncedLyricsNotFoundError
from .models import LyricSearchResult

logger = logging.getLogger(__name__)


def validate_duration(duration) -> None:
    """Raise InvalidArgumentError unless duration is None or a finite number of seconds."""
    if duration is None:
        return
    if isinstance(duration, bool) or not isinstance(duration, Real):
        raise InvalidArgumentError(f"duration must be a number, got {type(duration).__name__}")
    try:
        finite = math.isfinite(duration)
    except OverflowError:
        raise InvalidArgumentError("duration is too large to use as seconds") from None
    if not finite:
        raise InvalidArgumentError(f"duration must be finite, got {duration}")


def filter_synced(candidates: list[LyricSearchResult]) -> list[LyricSearchResult]:
    """Keep only the results that have synced lyrics, in their original order."""
    return [c for c in candidates if c.has_synced_lyrics]


def select_lyrics(
    candidates: list[LyricSearchResult],
    *,
    duration: float | None = None,
    synced_only: bool = False,
) -> LyricSearchResult:
    """Select a single result from a list of candidates.

    Args:
        candidates: Search results, in the order the provider returned them.
        duration: Optional track duration in seconds. If given, the result whose
            duration is closest wins; on a tie the earliest candidate is kept.
            If not given, the first candidate is returned.
        synced_only: Only consider results that have synced lyrics.

    Returns:
        One of the given candidates.

    Raises:
        InvalidArgumentError: duration is not a finite number.
        LyricsNotFoundError: There are no candidates to choose from.
        SyncedLyricsNotFoundError: There were candidates, but none with synced lyrics.
    """
    validate_duration(duration)

    if not candidates:
        raise LyricsNotFoundError("No lyrics candidates to select from")

    if synced_only:
        eligible = filter_synced(candidates)
        logger.debug("Synced filter kept %d of %d candidates", len(eligible), len(candidates))
        if not eligible:
            raise SyncedLyricsNotFoundError(
                f"None of the {len(candidates)} candidates have synced lyrics"
            )
    else:
        eligible = candidates

    if duration is None:
        return eligible[0]

    # min() keeps the first of equal keys
    best = min(eligible, key=lambda c: abs(c.duration - duration))
    logger.debug(
        "Closest match to %.2fs: id=%s (%.2fs)", duration, best.id, best.duration
    )
    return best
