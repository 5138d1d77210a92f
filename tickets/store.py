from __future__ import annotations

import csv
import logging
import threading
from datetime import UTC, datetime
from pathlib import Path

from tickets.models import Dataset
from tickets.parsing import parse_rows

logger = logging.getLogger(__name__)


class LoadError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class SourceUnavailableError(LoadError):
    """The source file could not be opened, read or decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__("SOURCE_UNAVAILABLE", f"cannot read {source}: {reason}")
        self.source = source


def load_dataset(source: str | Path) -> Dataset:
    """
    Read and parse the whole source file into a new Dataset.
    Single attempt, no retries.
    """
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            rows = list(csv.reader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise SourceUnavailableError(str(path), str(exc)) from exc

    parsed = parse_rows(rows)
    return Dataset(
        tickets=tuple(parsed.tickets),
        source=str(path),
        loaded_at=datetime.now(UTC),
        skipped_rows=parsed.skipped_rows,
    )


class TicketStore:
    """
    Holds the current Dataset.

    Readers grab the reference without locking; a reload parses off to the
    side and only takes the lock to swap the reference in.
    """

    def __init__(self, source: str | Path):
        self.source = str(source)
        self._dataset = Dataset.empty(self.source)
        self._swap_lock = threading.Lock()

    def current_snapshot(self) -> Dataset:
        return self._dataset

    def replace_dataset(self, source: str | Path | None = None) -> Dataset:
        target = str(source) if source is not None else self.source
        dataset = load_dataset(target)
        with self._swap_lock:
            self._dataset = dataset
        logger.info(
            "Dataset installed",
            extra={
                "source": dataset.source,
                "tickets": len(dataset),
                "skipped_rows": dataset.skipped_rows,
            },
        )
        return dataset
