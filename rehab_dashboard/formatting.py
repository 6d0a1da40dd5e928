"""Display formatting helpers."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Optional


def format_number(value: Any, digits: int = 1) -> str:
    """Fixed-point text for a number; non-finite or non-numeric values show as ``0.0``."""

    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return "0.0"
    return f"{value:.{digits}f}"


def parse_timestamp(raw: str) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, returning None when it is not one."""

    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw.strip())
    except ValueError:
        return None


def format_date(raw: str) -> str:
    """``Mon, Jan 5`` style date, or the raw text when unparseable."""

    parsed = parse_timestamp(raw)
    if parsed is None:
        return raw
    return f"{parsed:%a}, {parsed:%b} {parsed.day}"


def format_date_label(raw: str) -> str:
    parsed = parse_timestamp(raw)
    if parsed is None:
        return raw
    return f"{parsed:%b} {parsed.day}"


def truncate_hash(value: Optional[str], width: int = 16) -> str:
    if not value:
        return "-"
    if len(value) <= width:
        return value
    return value[:width] + "…"
