"""Print the dashboard report for a sessions dataset as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rehab_dashboard.config import DashboardConfig
from rehab_dashboard.dashboard import load_report


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarize rehabilitation session records")
    parser.add_argument("--data", help="Path to a sessions JSON file")
    parser.add_argument("--api-url", help="Sessions endpoint tried when the file cannot be read")
    parser.add_argument("--database-url", help="SQLAlchemy URL tried after the endpoint")
    parser.add_argument("--threshold-ms", type=float, help="Reaction time threshold in milliseconds")
    parser.add_argument("--output", help="Optional path to also write the report to")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = DashboardConfig.from_env()
    overrides = {
        "sessions_path": args.data,
        "api_url": args.api_url,
        "database_url": args.database_url,
        "threshold_ms": args.threshold_ms,
    }
    config = replace(config, **{key: value for key, value in overrides.items() if value is not None})

    report = load_report(config).to_dict()
    print(json.dumps(report, indent=2))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"Saved report to {out_path}")


if __name__ == "__main__":
    main()
