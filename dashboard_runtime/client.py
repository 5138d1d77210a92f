from __future__ import annotations

from typing import Any, Dict

import httpx


class DashboardClient:
    """Talks to a running dashboard server."""

    def __init__(self, base_url: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def summary(self) -> Dict[str, Any]:
        with httpx.Client(timeout=self.timeout) as client:
            r = client.get(f"{self.base_url}/api/summary")
            r.raise_for_status()
            return r.json()

    def reload(self) -> Dict[str, Any]:
        # one attempt; a failed reload is reported, not retried
        with httpx.Client(timeout=self.timeout) as client:
            r = client.post(f"{self.base_url}/api/reload")
            r.raise_for_status()
            return r.json()
