"""Tests ensuring observability wiring is safe by default."""
from __future__ import annotations

import importlib


def test_app_import_succeeds_when_opik_is_disabled(monkeypatch) -> None:
    monkeypatch.setenv("OPIK_ENABLED", "false")
    monkeypatch.delenv("OPIK_API_KEY", raising=False)

    import studysprint.core.config as core_config
    import studysprint.observability.client as client_module
    import studysprint.main as main_module

    importlib.reload(core_config)
    importlib.reload(client_module)
    reloaded_app = importlib.reload(main_module)

    assert hasattr(reloaded_app, "app")
    assert client_module.init_opik() is None


def test_reset_opik_allows_reinitialisation(monkeypatch) -> None:
    import studysprint.observability.client as client_module

    client_module.reset_opik()
    assert client_module._init_attempted is False
    assert client_module._client is None
