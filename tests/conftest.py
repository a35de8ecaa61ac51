"""
Shared fixtures: keep the user's environment and config file out of tests.
"""
import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Drop REPOURI_* variables and point REPOURI_CONFIG at an empty temp dir."""
    for key in list(os.environ):
        if key.startswith("REPOURI_"):
            monkeypatch.delenv(key, raising=False)
    config_path = tmp_path / "repouri" / "config.json"
    monkeypatch.setenv("REPOURI_CONFIG", str(config_path))
    return config_path
