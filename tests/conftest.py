"""
Test Configuration

Keeps every test away from the user's real configuration directory.
"""

import pytest


@pytest.fixture(autouse=True)
def isolated_config_path(tmp_path, monkeypatch):
    """Point the configuration file at a per-test temporary location."""
    config_path = tmp_path / "config" / "config.yaml"
    config_path.parent.mkdir()
    monkeypatch.setenv("PLAYLISTITER_CONFIG_PATH", str(config_path))
    return config_path
