from pathlib import Path

import pytest

from state_search import config
from state_search.config import Settings, optional_int, parse_log_level
from state_search.core.errors import InputError
from state_search.inputs import input_path, load_day, read_lines


def test_optional_int():
    assert optional_int("", "X") is None
    assert optional_int(" 42 ", "X") == 42
    with pytest.raises(ValueError, match="X must be an integer"):
        optional_int("nope", "X")
    with pytest.raises(ValueError, match="negative"):
        optional_int("-1", "X")


def test_settings_from_env(monkeypatch):
    monkeypatch.setattr(config, "INPUT_DIR", "/data/aoc")
    monkeypatch.setattr(config, "MAX_EXPANSIONS", "500")
    monkeypatch.setattr(config, "LOG_LEVEL", "debug")
    assert Settings.from_env() == Settings(Path("/data/aoc"), 500, "DEBUG")


def test_input_path():
    assert input_path(7) == Path("inputs/day07.txt")
    assert input_path(24, "elsewhere") == Path("elsewhere/day24.txt")


def test_read_lines_strips_newlines(tmp_path):
    f = tmp_path / "day12.txt"
    f.write_bytes(b"ab\r\ncd\n\n")
    assert read_lines(f) == ["ab", "cd", ""]
    assert load_day(12, input_dir=tmp_path) == ["ab", "cd", ""]


def test_missing_file_is_input_error(tmp_path):
    with pytest.raises(InputError, match="cannot read"):
        read_lines(tmp_path / "nope.txt")


def test_parse_log_level():
    assert parse_log_level(" info ", "X") == "INFO"
    with pytest.raises(ValueError, match="X must be one of DEBUG, INFO, WARNING, ERROR"):
        parse_log_level("verbose", "X")


def test_unknown_log_level_in_env(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="SEARCH_LOG_LEVEL"):
        Settings.from_env()
