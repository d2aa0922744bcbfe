"""
Shared pytest fixtures for reflag tests.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from reflag.registry import build_registries


@pytest.fixture
def registries():
    """Fresh (translators, preprocessors) pair for each test."""
    return build_registries()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the user's config, DEBUG and REFLAG_* settings."""
    for var in ("DEBUG", "NO_COLOR", "REFLAG_EXECUTE", "REFLAG_MODE",
                "REFLAG_SHELL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("REFLAG_CONFIG_DIR", str(tmp_path / "config"))
