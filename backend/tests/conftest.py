"""Shared fixtures for the backend test suite.

Every test that touches configuration gets its own config directory so the
developer's ``~/.textdiff`` is never read or written.
"""

from __future__ import annotations

import pytest

from services.config_manager import CONFIG_DIR_ENV, ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "config"))
    ConfigManager.reset_instance()
    yield tmp_path / "config"
    ConfigManager.reset_instance()
