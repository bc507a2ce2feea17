import os
import tempfile

from droptube.utils import ensure_dir, get_absolute_path, is_valid_dir


def test_ensure_dir_creates_directory(tmp_path):
    test_dir = tmp_path / "drop-tube-utils-test"
    ensure_dir(str(test_dir))
    assert is_valid_dir(str(test_dir)) is True


def test_ensure_dir_nested(tmp_path):
    test_dir = tmp_path / "x" / "y" / "z"
    ensure_dir(str(test_dir))
    assert test_dir.is_dir()


def test_ensure_dir_existing_is_noop(tmp_path):
    (tmp_path / "file.txt").write_text("content")
    ensure_dir(str(tmp_path))
    assert (tmp_path / "file.txt").read_text() == "content"


def test_is_valid_dir_temp_dir():
    assert is_valid_dir(tempfile.gettempdir()) is True


def test_is_valid_dir_nonexistent():
    assert is_valid_dir("/non/existent/path") is False


def test_is_valid_dir_regular_file(tmp_path):
    f = tmp_path / "plain.txt"
    f.write_text("x")
    assert is_valid_dir(str(f)) is False


def test_get_absolute_path_relative():
    result = get_absolute_path(".")
    assert os.path.isabs(result)
    assert result == os.getcwd()


def test_get_absolute_path_absolute(tmp_path):
    result = get_absolute_path(str(tmp_path))
    assert os.path.isabs(result)
    assert result == str(tmp_path)