"""Dashboard report composition."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Optional

from rehab_dashboard.aggregation import daily_buckets
from rehab_dashboard.config import DashboardConfig
from rehab_dashboard.formatting import format_date, format_number, truncate_hash
from rehab_dashboard.loader import build_sources, load_records
from rehab_dashboard.metrics import compute_metrics, is_violation, quantiles
from rehab_dashboard.normalizer import normalize_all
from rehab_dashboard.schema import AggregateBucket, QuantileSummary, Session


@dataclass
class DashboardReport:
    """Everything the presentation layer needs for one load."""

    source: str
    threshold_ms: float
    sessions: list[Session]
    metrics: dict
    quantiles: QuantileSummary
    buckets: list[AggregateBucket]
    table: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "threshold_ms": self.threshold_ms,
            "metrics": dict(self.metrics),
            "quantiles": asdict(self.quantiles),
            "buckets": [asdict(bucket) for bucket in self.buckets],
            "table": [dict(row) for row in self.table],
            "sessions": [asdict(session) for session in self.sessions],
        }


def table_rows(sessions: list[Session], threshold_seconds: float, limit: Optional[int] = None) -> list[dict]:
    """Formatted session rows for the clinician table."""

    shown = sessions if limit is None else sessions[:limit]
    return [
        {
            "id": session.id,
            "hash": truncate_hash(session.hash),
            "timestamp": format_date(session.date),
            "reaction": format_number(session.reaction_time),
            "status": "Violation" if is_violation(session, threshold_seconds) else "OK",
        }
        for session in shown
    ]


def build_report(
    records: Iterable[Any], config: Optional[DashboardConfig] = None, source: str = "memory"
) -> DashboardReport:
    """Normalize raw records and compute every dashboard figure from scratch."""

    config = config or DashboardConfig()
    sessions = normalize_all(records)
    threshold = config.threshold_seconds

    return DashboardReport(
        source=source,
        threshold_ms=config.threshold_ms,
        sessions=sessions,
        metrics=compute_metrics(sessions, config),
        quantiles=quantiles(sessions),
        buckets=daily_buckets(sessions, threshold),
        table=table_rows(sessions, threshold, config.preview_rows),
    )


def load_report(config: DashboardConfig) -> DashboardReport:
    """Load raw records through the source chain and build the report."""

    result = load_records(build_sources(config))
    return build_report(result.records, config, source=result.source)
