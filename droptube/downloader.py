"""Video downloading through the yt-dlp command-line tool."""

from __future__ import annotations

import logging
import os
import re
import subprocess
import threading
from typing import IO
from urllib.parse import urlsplit, urlunsplit

from tqdm import tqdm

from .config import Config

logger = logging.getLogger(__name__)

_EXECUTABLE = "yt-dlp"
_PROGRESS_RE = re.compile(r"\[download\]\s+(\d+(?:\.\d+)?)%", re.ASCII)


class DownloadError(Exception):
    """Raised when yt-dlp is unavailable or a download fails."""


def extract_height(quality: str) -> str:
    """Strip a trailing 'p' from a quality string: '1080p' -> '1080'."""
    return quality[:-1] if quality.endswith("p") else quality


def clean_url(raw_url: str) -> str:
    """Remove shell escaping backslashes and normalise the URL."""
    cleaned = raw_url.replace("\\", "")
    try:
        return urlunsplit(urlsplit(cleaned))
    except ValueError:
        return cleaned


def parse_progress(line: str) -> int | None:
    """Return the whole download percentage reported on a yt-dlp output line."""
    match = _PROGRESS_RE.search(line)
    if match is None:
        return None
    try:
        return int(float(match.group(1)))
    except ValueError:
        return None


class Downloader:
    """Runs yt-dlp according to a configuration."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def download(self) -> None:
        """Download the configured URL, raising DownloadError on failure."""
        try:
            self.check_installed()
        except DownloadError as exc:
            raise DownloadError(f"yt-dlp dependency check failed: {exc}") from exc

        if self.config.verbose:
            logger.info("starting download with config: %r", self.config)

        args = self.build_args()

        if self.config.verbose:
            logger.info("executing: %s %s", _EXECUTABLE, " ".join(args))

        cwd = self.config.output_dir or None
        try:
            if self.config.verbose:
                returncode = subprocess.run([_EXECUTABLE, *args], cwd=cwd).returncode
            else:
                returncode = self._run_with_progress(args, cwd)
        except OSError as exc:
            raise DownloadError(f"yt-dlp execution failed: {exc}") from exc

        if returncode != 0:
            raise DownloadError(f"yt-dlp execution failed: exit status {returncode}")

        print(f"download completed successfully in {self.config.output_dir}")

    def check_installed(self) -> None:
        """Verify that yt-dlp can be executed."""
        try:
            result = subprocess.run(
                [_EXECUTABLE, "--version"],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise DownloadError(f"yt-dlp not found or not executable: {exc}") from exc
        if result.returncode != 0:
            raise DownloadError(
                f"yt-dlp not found or not executable: exit status {result.returncode}"
            )

    def build_args(self) -> list[str]:
        """Build the yt-dlp command-line arguments."""
        cfg = self.config
        args: list[str] = []

        if cfg.audio_only:
            args += ["--extract-audio", "--audio-format", cfg.audio_format]
        else:
            spec = self.build_format_spec()
            if spec:
                args += ["--format", spec]

        args.append("--yes-playlist" if cfg.playlist else "--no-playlist")

        template = os.path.normpath(os.path.join(cfg.output_dir, "%(title)s.%(ext)s"))
        args += ["--output", template]

        if not cfg.verbose:
            args.append("--no-warnings")
        args.append("--newline")

        args.append(clean_url(cfg.url))
        return args

    def build_format_spec(self) -> str:
        """Build the yt-dlp format selector from format and quality."""
        fmt, quality = self.config.format, self.config.quality
        if fmt != "best" and quality != "best":
            height = extract_height(quality)
            return (
                f"bestvideo[ext={fmt}][height<={height}]+bestaudio"
                f"/best[ext={fmt}][height<={height}]"
            )
        if quality != "best":
            height = extract_height(quality)
            return f"bestvideo[height<={height}]+bestaudio/best[height<={height}]"
        if fmt != "best":
            return f"best[ext={fmt}]"
        return "best"

    def _run_with_progress(self, args: list[str], cwd: str | None) -> int:
        lock = threading.Lock()
        with subprocess.Popen(
            [_EXECUTABLE, *args],
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        ) as proc, tqdm(
            total=100,
            desc="downloading video...",
            bar_format="{l_bar}{bar:50}{r_bar}",
        ) as bar:

            def track(stream: IO[str]) -> None:
                for line in stream:
                    percent = parse_progress(line)
                    if percent is not None:
                        with lock:
                            bar.n = percent
                            bar.refresh()

            readers = [
                threading.Thread(target=track, args=(stream,), daemon=True)
                for stream in (proc.stdout, proc.stderr)
            ]
            for reader in readers:
                reader.start()
            returncode = proc.wait()
            for reader in readers:
                reader.join()
        return returncode