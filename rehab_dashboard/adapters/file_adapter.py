"""Local JSON file source for raw session records."""

from __future__ import annotations

import logging

from rehab_dashboard.recovery import recover_records

logger = logging.getLogger(__name__)


def load(file_path: str) -> list:
    """Read a sessions file, recovering concatenated JSON objects."""

    with open(file_path, encoding="utf-8") as handle:
        text = handle.read()

    records = recover_records(text)
    logger.debug(f"Read {len(records)} raw records from {file_path}")
    return records
