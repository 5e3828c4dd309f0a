"""
Pytest configuration and fixtures for source window tests.

Provides temporary source files, executables and sessions.
"""

import pytest
import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from source_window.config import Config
from source_window.output import BufferedSink
from source_window.session import StaticSession


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep environment overrides from leaking into configuration defaults."""
    for name in ("SOURCE_WINDOW_LOWER", "SOURCE_WINDOW_UPPER", "SOURCE_WINDOW_ENCODING"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def source_file(tmp_path):
    """A 30 line source file whose line N reads 'line N'."""
    path = tmp_path / "program.cs"
    path.write_text("".join(f"line {n}\n" for n in range(1, 31)))
    return str(path)


@pytest.fixture
def executable_file(tmp_path):
    """A stand-in for the debuggee executable."""
    path = tmp_path / "program.exe"
    path.write_bytes(b"MZ\x00\x00")
    return str(path)


@pytest.fixture
def make_session():
    """Factory for sessions built from explicit frame values."""
    def _make(file_name=None, line=-1, executable_path=None):
        return StaticSession.from_values(file_name, line, executable_path)
    return _make


@pytest.fixture
def sink():
    return BufferedSink()


@pytest.fixture
def config():
    return Config()
