"""Streamlit dashboard for rehabilitation session trust signals."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import Any

from rehab_dashboard.adapters import file_adapter
from rehab_dashboard.config import DashboardConfig
from rehab_dashboard.dashboard import DashboardReport, build_report, load_report, table_rows
from rehab_dashboard.formatting import format_date_label, format_number
from rehab_dashboard.recovery import recover_records

DEMO_DATASET = "examples/sample_sessions.json"


def _parse_uploaded(uploaded_file) -> list:
    text = uploaded_file.getvalue().decode("utf-8")
    return recover_records(text)


def _chart_rows(report: DashboardReport) -> dict[str, list[Any]]:
    chronological = list(reversed(report.sessions))
    return {
        "date": [format_date_label(session.date) for session in chronological],
        "reaction_time": [session.reaction_time for session in chronological],
    }


def _bucket_rows(report: DashboardReport) -> dict[str, list[Any]]:
    return {
        "day": [bucket.label for bucket in report.buckets],
        "average_reaction_time": [bucket.average_reaction_time for bucket in report.buckets],
        "violations": [bucket.violation_count for bucket in report.buckets],
    }


def violation_rule_text(threshold_ms: float) -> str:
    return f"Violations = flagged sessions OR reaction time > {format_number(threshold_ms, 0)}ms"


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Rehabilitation Trust Dashboard", layout="wide")
    st.title("Adaptive IoMT Rehabilitation Dashboard")
    st.caption("Reaction time and trust signals derived from XR rehabilitation sessions.")

    try:
        base_config = DashboardConfig.from_env()
    except ValueError as exc:
        st.error(f"Configuration error: {exc}")
        return

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload sessions file", type=["json"])
        use_demo = st.checkbox("Load demo dataset", value=uploaded is None)
        threshold_ms = st.number_input(
            "Violation threshold (ms)",
            min_value=0.0,
            max_value=60000.0,
            value=float(base_config.threshold_ms),
            step=250.0,
        )
        expanded = st.checkbox("Show all sessions", value=False)

    config = replace(base_config, threshold_ms=float(threshold_ms))

    try:
        if uploaded is not None:
            report = build_report(_parse_uploaded(uploaded), config, source=f"upload ({uploaded.name})")
        elif use_demo:
            report = build_report(file_adapter.load(DEMO_DATASET), config, source="demo dataset")
        else:
            report = load_report(config)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        st.error(f"Input error: {exc}")
        return
    except OSError:
        st.error("The demo dataset could not be read.")
        return

    metrics = report.metrics
    c1, c2 = st.columns(2)
    c1.metric("Avg Reaction Time (s)", format_number(metrics["average_reaction_time"]))
    c1.caption("Lower is better")
    c2.metric("Trust Rate", f"{format_number(metrics['trust_rate'], 0)}%")
    c2.caption(f"Violations: {metrics['violation_count']}", help=violation_rule_text(report.threshold_ms))

    if not report.sessions:
        st.info("Waiting for session data...")
    else:
        st.subheader("Reaction Time")
        st.area_chart(_chart_rows(report), x="date", y="reaction_time")

        st.subheader("Violation Events")
        st.bar_chart(_bucket_rows(report), x="day", y="violations")

        st.subheader("Reaction Time Distribution")
        q = report.quantiles
        st.table([{name: format_number(value, 2) for name, value in
                   (("min", q.min), ("q1", q.q1), ("median", q.median), ("q3", q.q3), ("max", q.max))}])

    st.subheader("Recent Sessions")
    limit = None if expanded else config.preview_rows
    rows = table_rows(report.sessions, config.threshold_seconds, limit)
    if rows:
        st.table(rows)
    else:
        st.write("No sessions recorded yet.")


if __name__ == "__main__":
    main()
