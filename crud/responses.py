"""Response helpers.

Action endpoints always answer HTTP 200 and carry the outcome in the payload
(`{"status": "success"|"error", "message": ..., "data": ...}`).
"""

from __future__ import annotations

import json
from typing import Dict, Optional

from werkzeug.wrappers import Response

SECURITY_HEADERS = [
    ("X-Content-Type-Options", "nosniff"),
    ("Referrer-Policy", "strict-origin-when-cross-origin"),
    ("Cache-Control", "no-store"),
]


def html_response(body: str, status: int = 200) -> Response:
    return Response(body, status=status, content_type="text/html; charset=utf-8", headers=SECURITY_HEADERS)


def json_response(payload: object, status: int = 200) -> Response:
    return Response(
        json.dumps(payload),
        status=status,
        content_type="application/json; charset=utf-8",
        headers=SECURITY_HEADERS,
    )


def api_error(message: str) -> Response:
    return json_response({"status": "error", "message": message})


def api_success(message: str, data: Optional[Dict[str, object]] = None) -> Response:
    payload: Dict[str, object] = {"status": "success", "message": message}
    if data is not None:
        payload["data"] = data
    return json_response(payload)
