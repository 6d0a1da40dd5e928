"""HTTP sessions endpoint source."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


def _extract_records(payload) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        sessions = payload.get("sessions")
        if sessions is None:
            return []
        if isinstance(sessions, list):
            return sessions
    raise ValueError("Sessions payload must be a list or an object with a 'sessions' list")


def load(url: str, timeout: float = 10.0, client: Optional[httpx.Client] = None) -> list:
    """Fetch raw session records from a sessions endpoint.

    Accepts either a bare JSON array or ``{"sessions": [...]}``. HTTP
    errors propagate as ``httpx.HTTPError``.
    """

    if client is None:
        with httpx.Client(timeout=timeout, follow_redirects=True) as owned:
            return load(url, timeout=timeout, client=owned)

    resp = client.get(url, headers={"Cache-Control": "no-store"})
    resp.raise_for_status()
    records = _extract_records(resp.json())
    logger.debug(f"Fetched {len(records)} raw records from {url}")
    return records
