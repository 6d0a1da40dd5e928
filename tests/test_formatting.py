from rehab_dashboard.formatting import (
    format_date,
    format_date_label,
    format_number,
    parse_timestamp,
    truncate_hash,
)


def test_format_number():
    assert format_number(2.345) == "2.3"
    assert format_number(87.5, 0) == "88"
    assert format_number(3, 2) == "3.00"


def test_format_number_non_finite():
    assert format_number(float("nan")) == "0.0"
    assert format_number(float("inf"), 0) == "0.0"
    assert format_number("abc") == "0.0"


def test_format_dates():
    assert format_date("2025-01-06T09:30:00") == "Mon, Jan 6"
    assert format_date_label("2025-01-06T09:30:00Z") == "Jan 6"


def test_unparseable_dates_pass_through():
    assert parse_timestamp("") is None
    assert format_date("yesterday") == "yesterday"
    assert format_date_label("") == ""


def test_truncate_hash():
    assert truncate_hash(None) == "-"
    assert truncate_hash("") == "-"
    assert truncate_hash("abc") == "abc"
    assert truncate_hash("0123456789abcdef0123", width=8) == "01234567…"
