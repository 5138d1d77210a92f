from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

SOURCE_COLUMNS = ("id", "created_at", "closed_at", "category", "priority", "status")


@dataclass(frozen=True)
class Ticket:
    id: int
    created_at: date
    closed_at: Optional[date]  # None while the ticket is open
    category: str
    priority: str
    status: str

    @property
    def is_closed(self) -> bool:
        # status text is informational only
        return self.closed_at is not None

    @property
    def resolution_hours(self) -> Optional[float]:
        """Hours between creation and closure; negative when closed before created."""
        if self.closed_at is None:
            return None
        return (self.closed_at - self.created_at).total_seconds() / 3600.0


@dataclass(frozen=True)
class Dataset:
    """
    One fully loaded snapshot of the source file.
    Never mutated; a reload builds a new instance.
    """

    tickets: Tuple[Ticket, ...] = ()
    source: str = ""
    loaded_at: Optional[datetime] = None  # None until a file has been loaded
    skipped_rows: int = 0

    @staticmethod
    def empty(source: str = "") -> "Dataset":
        return Dataset(tickets=(), source=source)

    def __len__(self) -> int:
        return len(self.tickets)
