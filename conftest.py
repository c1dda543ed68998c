"""
Root-level shared test fixtures.

Keeps SECRET_EXPORT_* settings from the developer's shell out of the tests.
"""

from __future__ import annotations

import pytest

from secret_export.config import reset_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove export env vars and the cached config between tests."""
    for key in [
        "SECRET_EXPORT_FORMAT",
        "SECRET_EXPORT_COLLECTION",
        "SECRET_EXPORT_LOG_LEVEL",
        "SECRET_EXPORT_FILE_MODE",
    ]:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
