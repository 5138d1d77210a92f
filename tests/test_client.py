from __future__ import annotations

from typing import Any

import httpx
import pytest

from dashboard_runtime.client import DashboardClient
from scripts import reload_dashboard


class _Client:
    def __init__(self, response: httpx.Response, seen: dict[str, Any]):
        self._response = response
        self._seen = seen

    def __enter__(self):
        return self

    def __exit__(self, *_args: Any):
        return None

    def get(self, url: str) -> httpx.Response:
        self._seen["call"] = ("GET", url)
        return self._response

    def post(self, url: str) -> httpx.Response:
        self._seen["call"] = ("POST", url)
        return self._response


def _patch_client(monkeypatch: pytest.MonkeyPatch, status: int, payload: dict[str, Any]) -> dict[str, Any]:
    seen: dict[str, Any] = {}

    def _factory(**kwargs: Any):
        seen.update(kwargs)
        request = httpx.Request("POST", "http://dash.local/api/reload")
        return _Client(httpx.Response(status, json=payload, request=request), seen)

    monkeypatch.setattr("httpx.Client", _factory)
    return seen


def test_reload_posts_to_reload_route(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _patch_client(monkeypatch, 200, {"total_tickets": 3})
    out = DashboardClient("http://dash.local/", timeout=2.0).reload()
    assert out == {"total_tickets": 3}
    assert seen["call"] == ("POST", "http://dash.local/api/reload")
    assert seen["timeout"] == 2.0


def test_summary_gets_summary_route(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _patch_client(monkeypatch, 200, {"total_tickets": 0})
    assert DashboardClient("http://dash.local").summary() == {"total_tickets": 0}
    assert seen["call"] == ("GET", "http://dash.local/api/summary")


def test_reload_failure_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_client(monkeypatch, 500, {"detail": "Failed to reload CSV: gone", "code": "SOURCE_UNAVAILABLE"})
    with pytest.raises(httpx.HTTPStatusError):
        DashboardClient("http://dash.local").reload()


def test_reload_script_reports_failure(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _patch_client(monkeypatch, 500, {"detail": "Failed to reload CSV: gone", "code": "SOURCE_UNAVAILABLE"})
    assert reload_dashboard.main(["--url", "http://dash.local"]) == 1
    assert "Reload failed (500)" in capsys.readouterr().out
