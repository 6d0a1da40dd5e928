import pytest

from rehab_dashboard.config import DashboardConfig
from rehab_dashboard.metrics import (
    compute_metrics,
    is_violation,
    mean_reaction_time,
    quantile,
    quantiles,
    trust_rate,
    violation_count,
)
from rehab_dashboard.schema import QuantileSummary, Session


def make_sessions(*pairs):
    return [
        Session(id=i + 1, hash=None, reaction_time=float(rt), violated=violated, date="")
        for i, (violated, rt) in enumerate(pairs)
    ]


def test_mean_reaction_time():
    sessions = make_sessions((False, 1), (False, 2), (True, 6))
    assert mean_reaction_time(sessions) == pytest.approx(3.0)


def test_empty_metrics_are_zero():
    assert mean_reaction_time([]) == 0.0
    assert violation_count([]) == 0
    assert trust_rate([]) == 0.0
    assert quantiles([]) == QuantileSummary(0.0, 0.0, 0.0, 0.0, 0.0)


def test_violation_count_flag_only():
    sessions = make_sessions((False, 2), (True, 1), (False, 10))
    assert violation_count(sessions) == 1


def test_violation_count_with_threshold():
    sessions = make_sessions((False, 2), (True, 1), (False, 10))
    assert violation_count(sessions, threshold_seconds=5) == 2


def test_threshold_is_strict():
    session = make_sessions((False, 5))[0]
    assert not is_violation(session, 5)
    assert is_violation(session, 4.999)


def test_trust_rate_matches_violation_share():
    sessions = make_sessions((False, 2), (True, 1), (False, 10), (False, 3))
    violations = violation_count(sessions, 5)
    assert trust_rate(sessions, 5) == pytest.approx(100 - (violations / len(sessions)) * 100)
    assert trust_rate(sessions, 5) == pytest.approx(50.0)


def test_quantiles_single_value():
    assert quantiles(make_sessions((False, 5))) == QuantileSummary(5.0, 5.0, 5.0, 5.0, 5.0)


def test_quantiles_interpolate():
    summary = quantiles(make_sessions((False, 4), (False, 1), (False, 3), (False, 2)))
    assert summary.min == 1.0
    assert summary.q1 == pytest.approx(1.75)
    assert summary.median == pytest.approx(2.5)
    assert summary.q3 == pytest.approx(3.25)
    assert summary.max == 4.0


def test_quantiles_are_ordered():
    summary = quantiles(make_sessions((False, 9), (True, 0.5), (False, 3.3), (False, 7), (False, 0)))
    assert summary.min <= summary.q1 <= summary.median <= summary.q3 <= summary.max


def test_quantile_boundaries():
    values = [1.0, 2.0, 3.0]
    assert quantile(values, 0.0) == 1.0
    assert quantile(values, 1.0) == 3.0
    assert quantile([], 0.5) == 0.0


def test_statistics_do_not_mutate_input():
    sessions = make_sessions((False, 3), (False, 1), (False, 2))
    snapshot = list(sessions)
    quantiles(sessions)
    compute_metrics(sessions)
    assert sessions == snapshot


def test_compute_metrics_uses_config_threshold():
    sessions = make_sessions((False, 2), (True, 1), (False, 10))
    result = compute_metrics(sessions, DashboardConfig(threshold_ms=5000))
    assert result["violation_count"] == 2
    assert result["total_sessions"] == 3
    assert result["average_reaction_time"] == pytest.approx(13 / 3)
    assert result["trust_rate"] == pytest.approx(100 / 3)

    lenient = compute_metrics(sessions, DashboardConfig(threshold_ms=20000))
    assert lenient["violation_count"] == 1
