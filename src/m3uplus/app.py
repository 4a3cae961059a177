"""Entry point for the m3uplus command-line tool."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Optional, Sequence

from m3uplus.core.config import SettingsManager
from m3uplus.core.env import resolve_log_level
from m3uplus.core.errors import InvalidPlaylistError
from m3uplus.core.m3u import load_playlist, read_playlist, save_playlist, write_playlist
from m3uplus.core.playlist import Playlist, PlaylistFormat

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Unknown codec names surface as LookupError, bad bytes or unencodable names as UnicodeError.
_PLAYLIST_ERRORS = (InvalidPlaylistError, OSError, UnicodeError, LookupError)


def _configure_logging(level_override: Optional[str] = None, log_file: Optional[Path] = None) -> None:
    level_name = (resolve_log_level() or level_override or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    formatter = logging.Formatter(_LOG_FORMAT)
    handlers: list[logging.Handler] = []
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            print(f"Cannot open log file {log_file}: {exc}", file=sys.stderr)
        else:
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
    logging.basicConfig(level=level, handlers=handlers, force=True)
    if log_file is not None and len(handlers) > 1:
        logger.info("Writing log to %s", log_file)


def _read(source: str, encoding: str) -> Playlist:
    if source == "-":
        return read_playlist(sys.stdin.buffer, encoding=encoding)
    return load_playlist(source, encoding=encoding)


def _cmd_validate(args: argparse.Namespace, settings: SettingsManager) -> int:
    failed = 0
    for source in args.paths:
        try:
            playlist = _read(source, settings.get_input_encoding())
        except _PLAYLIST_ERRORS as exc:
            logger.info("Validation failed for %s: %s", source, exc)
            print(f"{source}: {exc}", file=sys.stderr)
            failed += 1
            continue
        print(f"{source}: OK ({len(playlist.tracks)} tracks)")
    return 1 if failed else 0


def _cmd_convert(args: argparse.Namespace, settings: SettingsManager) -> int:
    playlist_format = PlaylistFormat.from_name(args.format) if args.format else settings.get_output_format()
    try:
        playlist = _read(args.path, settings.get_input_encoding())
        if args.output:
            target = save_playlist(playlist, args.output, playlist_format, encoding=settings.get_output_encoding())
            logger.info("Wrote %d tracks to %s", len(playlist.tracks), target)
        else:
            write_playlist(playlist, sys.stdout, playlist_format)
    except _PLAYLIST_ERRORS as exc:
        logger.error("Conversion of %s failed: %s", args.path, exc)
        print(f"{args.path}: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_info(args: argparse.Namespace, settings: SettingsManager) -> int:
    try:
        playlist = _read(args.path, settings.get_input_encoding())
    except _PLAYLIST_ERRORS as exc:
        logger.error("Reading %s failed: %s", args.path, exc)
        print(f"{args.path}: {exc}", file=sys.stderr)
        return 1

    print(f"url-tvg: {playlist.tvg_url or '-'}")
    print(f"x-tvg-url: {playlist.x_tvg_url or '-'}")
    for key, value in playlist.extra_attributes.items():
        print(f"{key}: {value}")
    live = sum(1 for track in playlist.tracks if track.is_live)
    print(f"tracks: {len(playlist.tracks)} (live: {live})")
    groups = Counter(track.group_title for track in playlist.tracks if track.group_title is not None)
    for title in playlist.group_titles():
        print(f"  {title}: {groups[title]}")
    ungrouped = sum(1 for track in playlist.tracks if track.group_title is None)
    if ungrouped and groups:
        print(f"  (no group): {ungrouped}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="m3uplus", description="Validate and convert M3U / M3U Plus playlists.")
    parser.add_argument("--config", type=Path, help="settings file (YAML)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="check playlists for structural errors")
    validate.add_argument("paths", nargs="+", help="playlist files, '-' for stdin")
    validate.set_defaults(handler=_cmd_validate)

    convert = subparsers.add_parser("convert", help="re-encode a playlist")
    convert.add_argument("path", help="playlist file, '-' for stdin")
    convert.add_argument("-o", "--output", type=Path, help="output file (default: stdout)")
    convert.add_argument("--format", choices=[member.value for member in PlaylistFormat])
    convert.set_defaults(handler=_cmd_convert)

    info = subparsers.add_parser("info", help="summarize a playlist")
    info.add_argument("path", help="playlist file, '-' for stdin")
    info.set_defaults(handler=_cmd_info)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = SettingsManager(config_path=args.config) if args.config else SettingsManager()
    _configure_logging(args.log_level or settings.get_diagnostics_log_level(), settings.get_diagnostics_log_file())
    logger.debug("Settings loaded from %s", settings.config_path)
    return args.handler(args, settings)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
