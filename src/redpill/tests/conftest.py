"""
Shared fixtures for redpill tests
"""
import pytest

from redpill.lib.config import ENV_OVERRIDES

@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's config file and REDPILL_* variables out of tests"""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REDPILL_CONFIG", str(tmp_path / "config.yaml"))
