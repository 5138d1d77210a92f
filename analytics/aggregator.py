from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Sequence

from analytics.summary import (
    CategoryAvgHours,
    CategoryCount,
    DayCount,
    OpenClosedCounts,
    Summary,
)
from tickets.models import Dataset, Ticket


def tickets_per_day(tickets: Iterable[Ticket]) -> List[DayCount]:
    counts = Counter(t.created_at.isoformat() for t in tickets)
    return [DayCount(date=d, count=c) for d, c in sorted(counts.items())]


def top_categories(tickets: Iterable[Ticket]) -> List[CategoryCount]:
    """Most frequent first; equal counts ordered by category name."""
    counts = Counter(t.category for t in tickets)
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [CategoryCount(category=cat, count=n) for cat, n in ordered]


def avg_resolution_hours_by_category(tickets: Iterable[Ticket]) -> List[CategoryAvgHours]:
    """
    Mean resolution time per category, closed tickets only.
    Categories without a closed ticket are left out rather than averaged over zero.
    """
    hours: Dict[str, List[float]] = defaultdict(list)
    for t in tickets:
        if t.resolution_hours is None:
            continue
        hours[t.category].append(t.resolution_hours)

    return [
        CategoryAvgHours(category=cat, avg_hours=sum(values) / len(values))
        for cat, values in sorted(hours.items())
    ]


def open_vs_closed(tickets: Iterable[Ticket]) -> OpenClosedCounts:
    open_count = 0
    closed_count = 0
    for t in tickets:
        if t.is_closed:
            closed_count += 1
        else:
            open_count += 1
    return OpenClosedCounts(open=open_count, closed=closed_count)


def compute_summary(snapshot: Dataset | Sequence[Ticket]) -> Summary:
    """Compute every view from the same snapshot so the totals agree."""
    tickets = snapshot.tickets if isinstance(snapshot, Dataset) else tuple(snapshot)
    oc = open_vs_closed(tickets)
    return Summary(
        tickets_per_day=tickets_per_day(tickets),
        top_categories=top_categories(tickets),
        avg_resolution_hours_by_category=avg_resolution_hours_by_category(tickets),
        open_vs_closed=oc,
        total_tickets=len(tickets),
        open_tickets=oc.open,
        closed_tickets=oc.closed,
    )
