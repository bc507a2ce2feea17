"""Download YouTube videos to local storage by running yt-dlp."""

__version__ = "0.1.0"