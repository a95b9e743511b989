"""
Pytest configuration and fixtures for the tag cloud tests.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from config import OUTPUT_CONFIG


@pytest.fixture(autouse=True)
def quiet_output(monkeypatch):
    """Silence progress output and restore the config after each test."""
    monkeypatch.setitem(OUTPUT_CONFIG, "verbose", False)
    monkeypatch.setitem(OUTPUT_CONFIG, "timing_info", False)


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "cli: marks tests as CLI functionality tests")
