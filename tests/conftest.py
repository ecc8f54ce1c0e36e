"""Pytest configuration and shared fixtures for the installer."""

import sys
import tempfile
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from adapters import script_runner  # noqa: E402


@pytest.fixture(name="temp_root")
def fixture_temp_root(tmp_path, monkeypatch):
    """Route tempfile's default directory to an empty per-test folder."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture(name="no_terminal_device")
def fixture_no_terminal_device(monkeypatch):
    """Pretend stdin is piped and /dev/tty cannot be opened."""

    def _fail():
        raise OSError("No such device or address: '/dev/tty'")

    monkeypatch.setattr(script_runner, "_stdin_is_interactive", lambda stream: False)
    monkeypatch.setattr(script_runner, "_open_terminal_device", _fail)


@pytest.fixture(name="write_script")
def fixture_write_script(tmp_path):
    """Write a Python script under tmp_path and return its path."""

    def _write(source, name="script.py"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
