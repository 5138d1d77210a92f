from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class DayCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    count: int


class CategoryCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    count: int


class CategoryAvgHours(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    avg_hours: float


class OpenClosedCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    open: int = 0
    closed: int = 0


class Summary(BaseModel):
    """Dashboard statistics for one dataset snapshot."""

    model_config = ConfigDict(frozen=True)

    tickets_per_day: List[DayCount] = Field(default_factory=list)
    top_categories: List[CategoryCount] = Field(default_factory=list)
    avg_resolution_hours_by_category: List[CategoryAvgHours] = Field(default_factory=list)
    open_vs_closed: OpenClosedCounts = Field(default_factory=OpenClosedCounts)
    total_tickets: int = 0
    open_tickets: int = 0
    closed_tickets: int = 0
