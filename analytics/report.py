from __future__ import annotations

import json
from pathlib import Path

from analytics.summary import Summary


def render_summary(summary: Summary) -> str:
    return json.dumps(summary.model_dump(), indent=2, sort_keys=True)


def write_summary(path: str | Path, summary: Summary) -> Path:
    """Write the summary document, creating parent directories as needed."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(render_summary(summary) + "\n", encoding="utf-8")
    return p
