"""CLI entry point for looking up lyrics with Lyrical."""

import argparse
import json
import logging
import sys

from .exceptions import LyricalError


def _format_time(seconds: float) -> str:
    """Format seconds as mm:ss.xx."""
    minutes, secs = divmod(max(seconds, 0.0), 60)
    return f"{int(minutes):02d}:{secs:05.2f}"


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def cmd_search(args):
    """Search LRCLIB and list all matching results."""
    from .lyrics_client import LyricalClient

    with LyricalClient() as client:
        results = client.query_song_lyrics(args.title, args.artist, synced_only=args.synced_only)

    if args.limit is not None:
        results = results[:args.limit]

    if args.json:
        _print_json([r.to_dict() for r in results])
        return

    if not results:
        print("No results with synced lyrics found.")
        return

    print(f"{'#':<4} {'ID':<10} {'Title':<35} {'Artist':<25} {'Length':<9} {'Lyrics':<12}")
    print("-" * 98)

    for i, result in enumerate(results, 1):
        if result.instrumental:
            status = "[instrumental]"
        elif result.has_synced_lyrics:
            status = "synced"
        elif result.plain_lyrics:
            status = "plain"
        else:
            status = "none"
        print(
            f"{i:<4} {str(result.id):<10} {result.track_name[:33]:<35} "
            f"{result.artist_name[:23]:<25} {_format_time(result.duration):<9} {status:<12}"
        )

    print(f"\nTotal: {len(results)} results")


def cmd_get(args):
    """Show the best matching lyrics for a song."""
    from .lyrics_client import LyricalClient

    with LyricalClient() as client:
        lyrics = client.get_lyrics(
            args.title,
            args.artist,
            duration=args.duration,
            synced_only=args.synced_only,
        )

    if args.json:
        _print_json(lyrics.to_dict())
        return

    print(f"{lyrics.track_name} — {lyrics.artist_name}")
    print(f"Album: {lyrics.album_name}  |  Length: {_format_time(lyrics.duration)}  |  ID: {lyrics.id}")
    print("---")

    if lyrics.instrumental:
        print("[instrumental]")
    elif args.plain or not lyrics.synced_lyrics:
        print(lyrics.plain_lyrics or "(no lyrics text)")
    else:
        print(lyrics.synced_lyrics)


def cmd_lines(args):
    """Show parsed synced lyric lines with their start and end times."""
    from .lyrics_client import LyricalClient

    with LyricalClient() as client:
        lines = client.get_lyric_lines(args.title, args.artist, duration=args.duration)

    if args.json:
        _print_json([line.to_dict() for line in lines])
        return

    if not lines:
        print("Synced lyrics contained no timestamped lines.")
        return

    for line in lines:
        print(f"[{_format_time(line.start)} - {_format_time(line.end)}] {line.text}")


def _add_song_arguments(parser):
    parser.add_argument("title", help="Song title")
    parser.add_argument("artist", help="Artist name")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lyrical",
        description="Lyrical - Look up (synced) song lyrics on LRCLIB",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # search command
    search_parser = subparsers.add_parser("search", help="List all lyrics matching a song")
    _add_song_arguments(search_parser)
    search_parser.add_argument(
        "--synced-only",
        action="store_true",
        help="Only list results with synced lyrics",
    )
    search_parser.add_argument(
        "-n", "--limit",
        type=_positive_int,
        default=None,
        help="Maximum number of results to show (default: all)",
    )
    search_parser.set_defaults(func=cmd_search)

    # get command
    get_parser = subparsers.add_parser("get", help="Show the best matching lyrics for a song")
    _add_song_arguments(get_parser)
    get_parser.add_argument(
        "-d", "--duration",
        type=float,
        default=None,
        help="Track duration in seconds, used to pick the closest match",
    )
    get_parser.add_argument(
        "--synced-only",
        action="store_true",
        help="Only consider results with synced lyrics",
    )
    get_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print plain lyrics instead of synced lyrics",
    )
    get_parser.set_defaults(func=cmd_get)

    # lines command
    lines_parser = subparsers.add_parser("lines", help="Show timed lyric lines for a song")
    _add_song_arguments(lines_parser)
    lines_parser.add_argument(
        "-d", "--duration",
        type=float,
        default=None,
        help="Track duration in seconds, used to pick the closest match",
    )
    lines_parser.set_defaults(func=cmd_lines)

    return parser


def main(argv=None):
    from .config import get_log_level

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    try:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else get_log_level(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        args.func(args)
    except LyricalError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
