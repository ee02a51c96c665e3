"""
Pytest configuration and fixtures for SOLID-D2 tests.
"""

import os

import pytest

from core.domain.products import sample_catalogue


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test in a clean cwd with no project/user .env leaking in."""
    for key in list(os.environ):
        if key.upper().startswith("SOLID_D2_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def products():
    """Book (red, small), laptop (blue, medium), Surfboard (green, large)."""
    return sample_catalogue()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "cli: Tests that drive the Typer app"
    )
