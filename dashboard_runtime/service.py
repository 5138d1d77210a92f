from __future__ import annotations

import logging
import time
from pathlib import Path

from analytics.aggregator import compute_summary
from analytics.summary import Summary
from dashboard_runtime.metrics import MetricsCollector
from tickets.models import Dataset
from tickets.store import LoadError, TicketStore

logger = logging.getLogger(__name__)


class DashboardService:
    """
    What the HTTP handlers and scripts talk to.
    Owns the TicketStore; summaries are always computed from a single snapshot.
    """

    def __init__(self, store: TicketStore, metrics: MetricsCollector):
        self.store = store
        self.metrics = metrics

    def snapshot(self) -> Dataset:
        return self.store.current_snapshot()

    def get_current_summary(self) -> Summary:
        return compute_summary(self.store.current_snapshot())

    def reload(self, source: str | Path | None = None) -> Summary:
        t0 = time.perf_counter()
        try:
            dataset = self.store.replace_dataset(source)
        except LoadError as exc:
            self.metrics.inc("dashboard_reloads_total", "failed")
            logger.error(
                "Reload failed",
                extra={"code": exc.code, "error": str(exc), "source": str(source or self.store.source)},
            )
            raise
        finally:
            self.metrics.observe_reload_latency((time.perf_counter() - t0) * 1000.0)

        self.metrics.inc("dashboard_reloads_total", "ok")
        self.metrics.inc("dashboard_rows_skipped_total", n=dataset.skipped_rows)
        # summarize the dataset we just built, not whatever is current by now
        return compute_summary(dataset)
