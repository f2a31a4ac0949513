"""Problem-details responses (``application/problem+json``)."""

from __future__ import annotations

from rest_framework.response import Response

PROBLEM_CONTENT_TYPE = "application/problem+json"


def problem_response(title: str, detail: str, status_code: int) -> Response:
    """Build a ``{"title", "detail"}`` problem body with the given status."""
    return Response(
        {"title": title, "detail": detail},
        status=status_code,
        content_type=PROBLEM_CONTENT_TYPE,
    )
