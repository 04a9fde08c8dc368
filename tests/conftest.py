"""Pytest configuration and fixtures.

Provides environment isolation and marker registration. All fixtures here are
autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr("eitherkit.config._DOTENV_LOADED", True)


@pytest.fixture(autouse=True)
def isolate_config_env(monkeypatch):
    """Clear EITHERKIT_* env vars so every test starts from defaults."""
    for key in list(os.environ.keys()):
        if key.startswith("EITHERKIT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Multi-step pipelines composed from several results",
        "allow_dotenv: Let python-dotenv read .env files during the test",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
