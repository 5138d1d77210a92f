from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

HEADER = "id,created_at,closed_at,category,priority,status"

EXAMPLE_ROWS = [
    "1,2026-01-05,2026-01-05,Password Reset,Low,Closed",
    "2,2026-01-05,2026-01-06,Printer,Medium,Closed",
    "3,2026-01-06,,Network,High,Open",
]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    def _write(rows: List[str], name: str = "tickets.csv", header: bool = True) -> Path:
        lines = ([HEADER] if header else []) + list(rows)
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_rows() -> List[str]:
    return list(EXAMPLE_ROWS)
