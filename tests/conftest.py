"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def one_line_file(tmp_path) -> Path:
    """Create a file holding a single line without a trailing newline."""
    path = tmp_path / "status"
    path.write_text("Charging")
    return path


@pytest.fixture
def trailing_newline_file(tmp_path) -> Path:
    """Create a file holding a single line ending in a newline."""
    path = tmp_path / "capacity"
    path.write_text("87\n")
    return path


@pytest.fixture
def multi_line_file(tmp_path) -> Path:
    """Create a file with several lines."""
    path = tmp_path / "uevent"
    path.write_text("POWER_SUPPLY_NAME=BAT0\nPOWER_SUPPLY_STATUS=Charging\n")
    return path


@pytest.fixture
def missing_file(tmp_path) -> Path:
    """Return a path that does not exist."""
    return tmp_path / "nonexistent"


@pytest.fixture
def invalid_utf8_file(tmp_path) -> Path:
    """Create a file that is not valid UTF-8."""
    path = tmp_path / "binary.dat"
    path.write_bytes(b"\xff\xfe\x00bad")
    return path


@pytest.fixture
def write_config(tmp_path):
    """Return a helper writing a JSON config file."""
    def _write(config: dict) -> Path:
        config_file = tmp_path / "tabby_config.json"
        config_file.write_text(json.dumps(config, indent=2))
        return config_file
    return _write
