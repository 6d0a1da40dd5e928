"""Dashboard configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_THRESHOLD_MS = 5000.0


def _read_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw in (None, ""):
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name}: expected a number, got '{raw}'") from exc


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name}: expected an integer, got '{raw}'") from exc


@dataclass
class DashboardConfig:
    """Settings passed explicitly into loading and statistics code."""

    threshold_ms: float = DEFAULT_THRESHOLD_MS
    sessions_path: str = "data/sessions.json"
    api_url: Optional[str] = None
    database_url: Optional[str] = None
    http_timeout: float = 10.0
    preview_rows: int = 8

    @property
    def threshold_seconds(self) -> float:
        return self.threshold_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DashboardConfig":
        """Build a config from ``REHAB_*`` variables, falling back to defaults."""

        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            threshold_ms=_read_float(env, "REHAB_THRESHOLD_MS", defaults.threshold_ms),
            sessions_path=env.get("REHAB_SESSIONS_PATH") or defaults.sessions_path,
            api_url=env.get("REHAB_API_URL") or None,
            database_url=env.get("REHAB_DATABASE_URL") or None,
            http_timeout=_read_float(env, "REHAB_HTTP_TIMEOUT", defaults.http_timeout),
            preview_rows=_read_int(env, "REHAB_PREVIEW_ROWS", defaults.preview_rows),
        )
