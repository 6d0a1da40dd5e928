"""SQL database source for session rows."""

from __future__ import annotations

import logging
import re

from sqlalchemy import create_engine, text

from rehab_dashboard.normalizer import db_row_to_record

logger = logging.getLogger(__name__)

_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def load(database_url: str, table: str = "sessions") -> list[dict]:
    """Read every row of ``table`` and map it onto the file record shape."""

    if not _TABLE_NAME.match(table):
        raise ValueError(f"Invalid table name '{table}'")

    engine = create_engine(database_url)
    try:
        with engine.connect() as conn:
            rows = conn.execute(text(f"SELECT * FROM {table}")).mappings().all()
    finally:
        engine.dispose()

    records = [db_row_to_record(row) for row in rows]
    logger.debug(f"Loaded {len(records)} rows from table {table}")
    return records
