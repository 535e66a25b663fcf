"""Pytest configuration and fixtures for duration_codec tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so duration_codec can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def codec_home(tmp_path, monkeypatch):
    """Point DURATION_CODEC_HOME at an empty temporary directory."""
    monkeypatch.setenv("DURATION_CODEC_HOME", str(tmp_path))
    return tmp_path
