import json
import logging

from rehab_dashboard.config import DashboardConfig
from rehab_dashboard.loader import EMPTY_SOURCE, DataSource, build_sources, load_records


def failing_source(name, calls):
    def fetch():
        calls.append(name)
        raise OSError(f"{name} unavailable")

    return DataSource(name, fetch)


def test_first_successful_source_wins():
    calls = []
    sources = [
        failing_source("file", calls),
        DataSource("http", lambda: calls.append("http") or [{"reaction": 1}]),
        DataSource("database", lambda: calls.append("database") or []),
    ]
    result = load_records(sources)
    assert result.source == "http"
    assert result.records == [{"reaction": 1}]
    assert calls == ["file", "http"]


def test_exhausted_chain_is_empty(caplog):
    calls = []
    with caplog.at_level(logging.WARNING):
        result = load_records([failing_source("file", calls), failing_source("http", calls)])
    assert result.records == []
    assert result.source == EMPTY_SOURCE
    assert calls == ["file", "http"]
    assert "All data sources failed" in caplog.text


def test_empty_source_list():
    assert load_records([]).source == EMPTY_SOURCE


def test_build_sources_order():
    config = DashboardConfig(api_url="http://localhost:3000/api/sessions", database_url="sqlite://")
    assert [s.name for s in build_sources(config)] == ["file", "http", "database"]
    assert [s.name for s in build_sources(DashboardConfig())] == ["file"]


def test_build_sources_reads_file(tmp_path):
    path = tmp_path / "sessions.json"
    path.write_text(json.dumps([{"reaction_time": 2}]), encoding="utf-8")
    result = load_records(build_sources(DashboardConfig(sessions_path=str(path))))
    assert result.source == "file"
    assert result.records == [{"reaction_time": 2}]


def test_malformed_file_falls_through(tmp_path):
    path = tmp_path / "sessions.json"
    path.write_text("{broken", encoding="utf-8")
    result = load_records(build_sources(DashboardConfig(sessions_path=str(path))))
    assert result.source == EMPTY_SOURCE
