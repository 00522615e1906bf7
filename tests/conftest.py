"""
Shared test fixtures for bytetable tests.
Patches the config module so no test depends on the real .env or environment.
"""

import pytest

from bytetable import config


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "DEFAULT_BORDER_STYLE", "single")
    monkeypatch.setattr(config, "DEFAULT_MAX_WIDTH", 80)
    monkeypatch.setattr(config, "COLORS_ENABLED", True)
    monkeypatch.setattr(config, "TRUECOLOR", True)
    monkeypatch.setattr(config, "RENDER_LOG_ENABLED", False)
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)
