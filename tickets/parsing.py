from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from tickets.models import SOURCE_COLUMNS, Ticket

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_ticket_id(raw: str) -> int:
    """Unparseable ids become 0; the row is still kept."""
    if not _INT_RE.fullmatch(raw):
        return 0
    return int(raw)


def parse_date(raw: str) -> Optional[date]:
    if not _DATE_RE.fullmatch(raw):
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def parse_created_date(raw: str) -> Optional[date]:
    """None means the caller must skip the row."""
    return parse_date(raw)


def parse_closed_date(raw: str) -> Optional[date]:
    """Empty or unparseable values both mean the ticket is open."""
    if raw == "":
        return None
    return parse_date(raw)


@dataclass
class ParseResult:
    tickets: List[Ticket]
    skipped_rows: int = 0


def parse_row(row: Sequence[str], row_number: int) -> Optional[Ticket]:
    """
    Build a Ticket from one data row.
    row_number is the 1-based CSV record number (header is row 1).
    """
    if len(row) < len(SOURCE_COLUMNS):
        return None

    created_at = parse_created_date(row[1])
    if created_at is None:
        logger.warning(
            "Skipping row: invalid created_at",
            extra={"row_number": row_number, "field": "created_at", "value": row[1]},
        )
        return None

    return Ticket(
        id=parse_ticket_id(row[0]),
        created_at=created_at,
        closed_at=parse_closed_date(row[2]),
        category=row[3],
        priority=row[4],
        status=row[5],
    )


def parse_rows(rows: Iterable[Sequence[str]]) -> ParseResult:
    """Parse CSV rows including the header, which is skipped."""
    result = ParseResult(tickets=[])
    for i, row in enumerate(rows):
        if i == 0:
            continue
        if len(row) < len(SOURCE_COLUMNS):
            continue
        ticket = parse_row(row, row_number=i + 1)
        if ticket is None:
            result.skipped_rows += 1
            continue
        result.tickets.append(ticket)
    return result
