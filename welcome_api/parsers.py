"""Request body parsing applied to every request."""
from __future__ import annotations

from typing import Any

from flask import Flask, g, request

FORM_MIMETYPE = "application/x-www-form-urlencoded"


def register_body_parsers(app: Flask) -> None:
    """Parse JSON and url-encoded bodies into ``g.body`` before dispatch."""

    @app.before_request
    def parse_body() -> None:
        g.body = parse_request_body()


def parse_request_body() -> Any:
    """Return the decoded body of the current request, or ``None``.

    Bodies that fail to decode are treated as absent so handlers that never
    look at the body are unaffected by them.
    """
    if request.is_json:
        return request.get_json(silent=True)
    if request.mimetype == FORM_MIMETYPE:
        return _collapse_form(request.form.to_dict(flat=False))
    return None


def _collapse_form(fields: dict[str, list[str]]) -> dict[str, Any]:
    # Repeated keys stay lists, single values are unwrapped.
    return {key: values[0] if len(values) == 1 else values for key, values in fields.items()}
