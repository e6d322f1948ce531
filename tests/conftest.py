"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in scale library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_spelling" / "scales" / "library"
