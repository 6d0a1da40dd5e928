"""Per-label rollups of sessions for trend charts."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from rehab_dashboard.formatting import format_date_label
from rehab_dashboard.metrics import is_violation
from rehab_dashboard.schema import AggregateBucket, Session


def aggregate(
    sessions: Sequence[Session],
    label_of: Callable[[Session], str],
    threshold_seconds: Optional[float] = None,
) -> list[AggregateBucket]:
    """Group sessions by label, keeping labels in order of first occurrence."""

    totals: dict[str, list] = {}
    for session in sessions:
        label = label_of(session)
        entry = totals.setdefault(label, [0.0, 0, 0])
        entry[0] += session.reaction_time
        entry[1] += 1
        entry[2] += 1 if is_violation(session, threshold_seconds) else 0

    return [
        AggregateBucket(label=label, average_reaction_time=total / count, violation_count=violations)
        for label, (total, count, violations) in totals.items()
    ]


def daily_buckets(sessions: Sequence[Session], threshold_seconds: Optional[float] = None) -> list[AggregateBucket]:
    """Per-day buckets in chronological order for newest-first session lists."""

    return aggregate(
        list(reversed(sessions)),
        lambda session: format_date_label(session.date),
        threshold_seconds,
    )
