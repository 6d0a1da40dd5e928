"""Demo script for rehab-dashboard."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rehab_dashboard.adapters.file_adapter import load
from rehab_dashboard.dashboard import build_report


def main() -> None:
    report = build_report(load("examples/sample_sessions.json"))
    print("Metrics:", report.metrics)
    print("Quantiles:", report.quantiles)
    for bucket in report.buckets:
        print("Bucket:", bucket)


if __name__ == "__main__":
    main()
