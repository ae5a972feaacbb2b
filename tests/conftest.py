"""Global test fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of Config() in tests."""
    monkeypatch.delenv("TENANTGUARD_CONFIG_FILE", raising=False)
    monkeypatch.delenv("TENANTGUARD_LOG_FILE", raising=False)
