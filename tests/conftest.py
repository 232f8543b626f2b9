"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hexcodec.config import reset_settings


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: performance benchmarks")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Isolate each test from cached settings and any local .env file."""
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="session")
def test_vectors():
    """Fixture providing known encode/decode pairs."""
    return [
        (b"", ""),
        (bytes([0x00, 0xFF, 0x1A]), "00FF1A"),
        (b"hello", "68656C6C6F"),
        (bytes([0, 1, 2, 255, 254, 253]), "000102FFFEFD"),
    ]
