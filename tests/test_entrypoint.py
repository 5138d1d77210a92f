from __future__ import annotations

import runpy
from typing import Any

import pytest

from dashboard_runtime.config import settings


def test_module_entrypoint_starts_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    def _fake_run(app: Any, **kwargs: Any) -> None:
        seen["app"] = app
        seen.update(kwargs)

    monkeypatch.setattr("uvicorn.run", _fake_run)
    runpy.run_module("dashboard_runtime", run_name="__main__")

    assert seen["host"] == settings.host
    assert seen["port"] == settings.port
    assert seen["app"].title == "Ticket Dashboard"
