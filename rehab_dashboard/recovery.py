"""Best-effort recovery of session records from malformed JSON text."""

from __future__ import annotations

import json
import re

_OBJECT_BOUNDARY = re.compile(r"}\s*{")


def recover_records(text: str) -> list:
    """Parse ``text`` into a list of raw records.

    A JSON array is returned as-is and any other JSON value becomes a
    one-element list. When strict parsing fails the text is treated as
    back-to-back objects (``{...}{...}``): a comma is inserted at every
    ``}{`` boundary and the whole is wrapped in brackets before parsing
    again. The boundary match is purely textual, so ``}{`` inside a string
    value is rewritten as well. A second failure raises
    ``json.JSONDecodeError``.
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        joined = _OBJECT_BOUNDARY.sub("},\n{", text)
        payload = json.loads("[" + joined + "]")

    if isinstance(payload, list):
        return payload
    return [payload]
