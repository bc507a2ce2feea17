"""Small filesystem helpers."""

from __future__ import annotations

import os


def ensure_dir(dir_path: str) -> None:
    """Create the directory if it does not exist."""
    try:
        os.stat(dir_path)
    except FileNotFoundError:
        try:
            os.makedirs(dir_path, mode=0o755, exist_ok=True)
        except OSError as exc:
            raise OSError(
                exc.errno, f"failed to create directory {dir_path}: {exc.strerror}"
            ) from exc
    except OSError:
        pass


def is_valid_dir(dir_path: str) -> bool:
    """Return True if the path exists and is a directory."""
    try:
        return os.path.isdir(dir_path) and os.stat(dir_path) is not None
    except OSError:
        return False


def get_absolute_path(path: str) -> str:
    """Return the absolute form of the given path."""
    try:
        return os.path.abspath(path)
    except OSError as exc:
        raise OSError(
            exc.errno, f"failed to get absolute path for {path}: {exc.strerror}"
        ) from exc