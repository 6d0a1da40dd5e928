"""Normalization of loosely structured session records."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Iterable, Optional

from rehab_dashboard.schema import Session

_HASH_KEYS = ("hash", "block_hash")
_REACTION_KEYS = ("reaction_time", "reaction")
_VIOLATED_KEYS = ("violated",)
_DATE_KEYS = ("timestamp", "date", "time")
_ID_KEYS = ("id",)
_DB_REACTION_KEYS = ("duration", "final_score", "smoothness")


def _lookup(record: Mapping, keys: tuple[str, ...]) -> Any:
    """Return the value of the first key present with a non-null value."""

    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _to_seconds(value: Any) -> float:
    if isinstance(value, bool):
        number = 1.0 if value else 0.0
    elif isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0

    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _to_flag(value: Any) -> bool:
    # JavaScript truthiness: containers and objects count as true.
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    try:
        return str(value)
    except ValueError:
        # int too long for str()
        return ""


def _to_hash(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return _to_text(value) or None


def _to_id(value: Any, index: int) -> int:
    if isinstance(value, bool):
        return index + 1
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return index + 1
    return index + 1


def normalize(raw: Any, index: int) -> Session:
    """Convert one raw record into a ``Session``; never raises.

    Event fields (reaction time, violation flag, timestamp) are read from a
    nested ``event`` mapping when one exists. The id and hash always come
    from the outer record.
    """

    record = raw if isinstance(raw, Mapping) else {}
    nested = record.get("event")
    event = nested if isinstance(nested, Mapping) else record

    return Session(
        id=_to_id(_lookup(record, _ID_KEYS), index),
        hash=_to_hash(_lookup(record, _HASH_KEYS)),
        reaction_time=_to_seconds(_lookup(event, _REACTION_KEYS)),
        violated=_to_flag(_lookup(event, _VIOLATED_KEYS)),
        date=_to_text(_lookup(event, _DATE_KEYS)),
    )


def normalize_all(records: Iterable[Any]) -> list[Session]:
    """Normalize a batch, keeping input order and unique ids."""

    sessions = [normalize(raw, index) for index, raw in enumerate(records)]
    if len({session.id for session in sessions}) == len(sessions):
        return sessions

    # Colliding explicit ids: fall back to ordinal ids for the whole batch.
    return [replace(session, id=index + 1) for index, session in enumerate(sessions)]


def db_row_to_record(row: Mapping) -> dict:
    """Map a database session row onto the file record shape."""

    return {
        "id": row.get("id"),
        "hash": row.get("session_id"),
        "reaction_time": _lookup(row, _DB_REACTION_KEYS) or 0,
        "violated": False,
        "date": row.get("date") or "",
    }
