"""Reaction-time and trust metrics."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from rehab_dashboard.config import DashboardConfig
from rehab_dashboard.schema import QuantileSummary, Session

_QUANTILE_POINTS = (0.0, 0.25, 0.5, 0.75, 1.0)


def _reaction_times(sessions: Sequence[Session]) -> np.ndarray:
    return np.array([session.reaction_time for session in sessions], dtype=float)


def mean_reaction_time(sessions: Sequence[Session]) -> float:
    """Average reaction time in seconds, 0 for an empty sequence."""

    return float(_reaction_times(sessions).sum()) / max(len(sessions), 1)


def is_violation(session: Session, threshold_seconds: Optional[float] = None) -> bool:
    """Flagged sessions always count; slow sessions count when a threshold is given."""

    if session.violated:
        return True
    return threshold_seconds is not None and session.reaction_time > threshold_seconds


def violation_count(sessions: Sequence[Session], threshold_seconds: Optional[float] = None) -> int:
    return sum(1 for session in sessions if is_violation(session, threshold_seconds))


def trust_rate(sessions: Sequence[Session], threshold_seconds: Optional[float] = None) -> float:
    """Percentage of sessions without a violation, 0 for an empty sequence."""

    total = len(sessions)
    return (total - violation_count(sessions, threshold_seconds)) / max(total, 1) * 100.0


def quantile(sorted_values: Sequence[float], p: float) -> float:
    """Linearly interpolated quantile of already sorted values."""

    if len(sorted_values) == 0:
        return 0.0
    pos = (len(sorted_values) - 1) * p
    base = math.floor(pos)
    frac = pos - base
    if base + 1 < len(sorted_values):
        return float(sorted_values[base] + frac * (sorted_values[base + 1] - sorted_values[base]))
    return float(sorted_values[base])


def quantiles(sessions: Sequence[Session]) -> QuantileSummary:
    """Min, quartiles and max of reaction times; all zero when empty."""

    ordered = np.sort(_reaction_times(sessions))
    low, q1, median, q3, high = (quantile(ordered, p) for p in _QUANTILE_POINTS)
    return QuantileSummary(min=low, q1=q1, median=median, q3=q3, max=high)


def compute_metrics(sessions: Sequence[Session], config: Optional[DashboardConfig] = None) -> dict:
    """Compute average reaction time, violation count and trust rate."""

    threshold = (config or DashboardConfig()).threshold_seconds
    return {
        "average_reaction_time": mean_reaction_time(sessions),
        "violation_count": violation_count(sessions, threshold),
        "trust_rate": trust_rate(sessions, threshold),
        "total_sessions": len(sessions),
    }
