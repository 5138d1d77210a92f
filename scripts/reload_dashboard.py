from __future__ import annotations

import argparse
import json

import httpx

from dashboard_runtime.client import DashboardClient
from dashboard_runtime.config import settings


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Ask a running dashboard to re-read its CSV")
    ap.add_argument("--url", default=f"http://localhost:{settings.port}")
    ap.add_argument("--timeout", type=float, default=5.0)
    args = ap.parse_args(argv)

    client = DashboardClient(args.url, timeout=args.timeout)
    try:
        summary = client.reload()
    except httpx.HTTPStatusError as exc:
        print(f"Reload failed ({exc.response.status_code}): {exc.response.text}")
        return 1
    except httpx.HTTPError as exc:
        print(f"Reload failed: {exc}")
        return 1

    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
