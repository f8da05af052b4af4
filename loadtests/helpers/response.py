"""Response error extraction for load test observability.

Parses Warehouse Tracker API error responses into human-readable messages:

    {"status": 400, "error": "Validation Failed", "message": "...",
     "validation_errors": {"field": "msg"}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except Exception:
        # Not JSON — return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict) or "error" not in body:
        return str(body)[:300]

    detail = f"{body['error']}: {body.get('message', '')}"
    fields = body.get("validation_errors") or {}
    if fields:
        detail += " | " + " | ".join(f"{k}: {v}" for k, v in fields.items())
    return detail
