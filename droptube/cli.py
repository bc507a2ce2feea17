"""Command-line interface for downloading videos."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Sequence

from .config import (
    DEFAULT_AUDIO_FORMAT,
    DEFAULT_AUDIO_ONLY,
    DEFAULT_FORMAT,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PLAYLIST,
    DEFAULT_QUALITY,
    DEFAULT_VERBOSE,
    Config,
    ConfigError,
)
from .downloader import DownloadError, Downloader

_PROG = "drop-tube"
_USAGE = "%(prog)s [OPTIONS] <YouTube URL>"
_SHORT = "Download YouTube videos to local storage"
_LONG = (
    "DropTube is a command-line tool for downloading YouTube videos.\n"
    "It supports various formats and quality options while respecting "
    "YouTube's terms of service."
)


class _UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser; parse errors raise instead of exiting."""
    parser = _Parser(
        prog=_PROG,
        usage=_USAGE,
        description=f"{_SHORT}\n\n{_LONG}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", metavar="URL", help="YouTube URL to download")
    parser.add_argument(
        "-o", "--output", dest="output_dir", default=DEFAULT_OUTPUT_DIR,
        help="output directory",
    )
    parser.add_argument(
        "-f", "--format", dest="format", default=DEFAULT_FORMAT,
        help="video format (mp4, webm, best)",
    )
    parser.add_argument(
        "-q", "--quality", dest="quality", default=DEFAULT_QUALITY,
        help="video quality (720p, 1080p, best)",
    )
    parser.add_argument(
        "-a", "--audio-only", dest="audio_only", action="store_true",
        default=DEFAULT_AUDIO_ONLY, help="download audio only",
    )
    parser.add_argument(
        "--audio-format", dest="audio_format", default=DEFAULT_AUDIO_FORMAT,
        help="audio format (mp3, m4a)",
    )
    parser.add_argument(
        "--playlist", dest="playlist", action="store_true",
        default=DEFAULT_PLAYLIST, help="download entire playlist",
    )
    parser.add_argument(
        "-v", "--verbose", dest="verbose", action="store_true",
        default=DEFAULT_VERBOSE, help="verbose output",
    )
    return parser


def _run(argv: Sequence[str] | None) -> None:
    options = build_parser().parse_args(argv)
    cfg = Config(
        output_dir=options.output_dir,
        format=options.format,
        quality=options.quality,
        audio_only=options.audio_only,
        audio_format=options.audio_format,
        playlist=options.playlist,
        verbose=options.verbose,
        url=options.url,
    )

    try:
        cfg.validate()
    except ConfigError as exc:
        raise ConfigError(f"configuration validation failed: {exc}") from exc

    if cfg.verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(asctime)s %(message)s", stream=sys.stderr
        )

    Downloader(cfg).download()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    try:
        _run(argv)
    except (_UsageError, ConfigError, DownloadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())