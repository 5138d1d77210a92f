from __future__ import annotations

import threading
from collections import Counter
from typing import Tuple


class MetricsCollector:
    """Small in-memory Prometheus-style metrics collector."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: Counter[Tuple[str, str]] = Counter()
        self._latency_buckets: Counter[str] = Counter()
        self._bucket_edges = (5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000)

    def inc(self, name: str, label: str = "", n: int = 1) -> None:
        with self._lock:
            self._counters[(name, label)] += n

    def value(self, name: str, label: str = "") -> int:
        with self._lock:
            return self._counters[(name, label)]

    def observe_reload_latency(self, latency_ms: float) -> None:
        bucket = self._bucket_for(latency_ms)
        with self._lock:
            self._latency_buckets[bucket] += 1

    def _bucket_for(self, latency_ms: float) -> str:
        for edge in self._bucket_edges:
            if latency_ms <= edge:
                return str(edge)
        return "+Inf"

    def render_prometheus(self) -> str:
        with self._lock:
            counters = sorted(self._counters.items())
            buckets = sorted(self._latency_buckets.items())

        lines = []
        lines.append("# TYPE dashboard_reloads_total counter")
        for (name, label), value in counters:
            if name != "dashboard_reloads_total":
                continue
            lines.append(f'dashboard_reloads_total{{result="{label}"}} {value}')

        lines.append("# TYPE dashboard_rows_skipped_total counter")
        skipped = sum(v for (name, _), v in counters if name == "dashboard_rows_skipped_total")
        lines.append(f"dashboard_rows_skipped_total {skipped}")

        lines.append("# TYPE dashboard_summary_requests_total counter")
        for (name, label), value in counters:
            if name != "dashboard_summary_requests_total":
                continue
            lines.append(f'dashboard_summary_requests_total{{route="{label}"}} {value}')

        lines.append("# TYPE dashboard_reload_latency_ms_bucket counter")
        for bucket, value in buckets:
            lines.append(f'dashboard_reload_latency_ms_bucket{{le="{bucket}"}} {value}')

        return "\n".join(lines) + "\n"
