from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft202012Validator

from analytics.summary import Summary

_SCHEMA_PATH = Path(__file__).resolve().parent / "summary_schema.json"


@lru_cache(maxsize=1)
def summary_validator() -> Draft202012Validator:
    schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_summary_payload(payload: Dict[str, Any]) -> None:
    """Raise ValueError listing every violation of the summary document schema."""
    errors = sorted(summary_validator().iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        joined = "; ".join(f"{'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors)
        raise ValueError(f"summary schema validation failed: {joined}")


def validate_summary(summary: Summary) -> None:
    validate_summary_payload(summary.model_dump())
