"""Ordered fallback chain over raw session data sources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Sequence

from rehab_dashboard.adapters import db_adapter, file_adapter, http_adapter
from rehab_dashboard.config import DashboardConfig

logger = logging.getLogger(__name__)

EMPTY_SOURCE = "empty"


@dataclass
class DataSource:
    """A named strategy producing raw records, or raising to signal "try next"."""

    name: str
    fetch: Callable[[], list]


@dataclass
class LoadResult:
    records: list
    source: str


def build_sources(config: DashboardConfig) -> list[DataSource]:
    """Local file first, then the HTTP endpoint and database when configured."""

    sources = [DataSource("file", partial(file_adapter.load, config.sessions_path))]
    if config.api_url:
        sources.append(DataSource("http", partial(http_adapter.load, config.api_url, config.http_timeout)))
    if config.database_url:
        sources.append(DataSource("database", partial(db_adapter.load, config.database_url)))
    return sources


def load_records(sources: Sequence[DataSource]) -> LoadResult:
    """Try each source once, in order; an exhausted chain yields no records."""

    for source in sources:
        try:
            records = source.fetch()
        except Exception as exc:  # noqa: BLE001
            logger.warning(f"Source '{source.name}' failed, trying next: {exc}")
            continue
        logger.info(f"Loaded {len(records)} raw records from source '{source.name}'")
        return LoadResult(records=records, source=source.name)

    logger.warning("All data sources failed, using an empty dataset")
    return LoadResult(records=[], source=EMPTY_SOURCE)
