"""Download configuration and its validation."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_OUTPUT_DIR = "."
DEFAULT_FORMAT = "best"
DEFAULT_AUDIO_FORMAT = "mp3"
DEFAULT_QUALITY = "best"
DEFAULT_VERBOSE = False
DEFAULT_AUDIO_ONLY = False
DEFAULT_PLAYLIST = False


class ConfigError(Exception):
    """Raised when a configuration is incomplete or cannot be applied."""


@dataclass
class Config:
    """Parameters that control how a video is downloaded."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    format: str = DEFAULT_FORMAT
    quality: str = DEFAULT_QUALITY
    audio_only: bool = DEFAULT_AUDIO_ONLY
    audio_format: str = DEFAULT_AUDIO_FORMAT
    playlist: bool = DEFAULT_PLAYLIST
    verbose: bool = DEFAULT_VERBOSE
    url: str = ""

    def validate(self) -> None:
        """Check the configuration, make the output directory absolute and create it."""
        if not self.url:
            raise ConfigError("youtube URL is required")

        if self.output_dir:
            try:
                self.output_dir = os.path.abspath(self.output_dir)
            except OSError as exc:
                raise ConfigError(f"invalid output directory path: {exc}") from exc

            try:
                self.ensure_output_dir()
            except ConfigError as exc:
                raise ConfigError(f"failed to create output directory: {exc}") from exc

    def ensure_output_dir(self) -> None:
        """Create the output directory if it does not exist."""
        try:
            os.stat(self.output_dir)
        except FileNotFoundError:
            try:
                os.makedirs(self.output_dir, mode=0o755, exist_ok=True)
            except OSError as exc:
                raise ConfigError(
                    f"failed to create directory {self.output_dir}: {exc}"
                ) from exc
        except OSError:
            # Only a missing path triggers creation; other stat failures are left alone.
            pass