import os
from unittest.mock import patch

import pytest

from droptube.config import (
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


def test_new_config_defaults():
    cfg = Config()
    assert cfg.output_dir == DEFAULT_OUTPUT_DIR == "."
    assert cfg.format == DEFAULT_FORMAT == "best"
    assert cfg.quality == DEFAULT_QUALITY == "best"
    assert cfg.audio_only is DEFAULT_AUDIO_ONLY is False
    assert cfg.audio_format == DEFAULT_AUDIO_FORMAT == "mp3"
    assert cfg.playlist is DEFAULT_PLAYLIST is False
    assert cfg.verbose is DEFAULT_VERBOSE is False
    assert cfg.url == ""


def test_validate_valid_config_makes_output_dir_absolute():
    cfg = Config(url="https://youtube.com/watch?v=123", output_dir=".")
    cfg.validate()
    assert cfg.output_dir == os.getcwd()
    assert os.path.isabs(cfg.output_dir)


def test_validate_missing_url():
    cfg = Config(output_dir=".")
    with pytest.raises(ConfigError, match="youtube URL is required"):
        cfg.validate()


def test_validate_creates_missing_output_dir(tmp_path):
    target = tmp_path / "a" / "b"
    cfg = Config(url="https://youtube.com/watch?v=123", output_dir=str(target))
    cfg.validate()
    assert target.is_dir()
    assert cfg.output_dir == str(target)


def test_validate_empty_output_dir_left_unchanged():
    cfg = Config(url="https://youtube.com/watch?v=123", output_dir="")
    cfg.validate()
    assert cfg.output_dir == ""


def test_ensure_output_dir_creates_directory(tmp_path):
    test_dir = tmp_path / "drop-tube-test"
    cfg = Config(output_dir=str(test_dir))
    cfg.ensure_output_dir()
    assert test_dir.is_dir()


def test_ensure_output_dir_existing_directory_is_kept(tmp_path):
    marker = tmp_path / "keep.txt"
    marker.write_text("data")
    cfg = Config(output_dir=str(tmp_path))
    cfg.ensure_output_dir()
    assert marker.read_text() == "data"


def test_validate_reports_creation_failure(tmp_path):
    target = tmp_path / "blocked"
    cfg = Config(url="https://youtube.com/watch?v=123", output_dir=str(target))
    with patch("droptube.config.os.makedirs", side_effect=PermissionError("denied")):
        with pytest.raises(ConfigError, match="failed to create output directory"):
            cfg.validate()
    assert not target.exists()