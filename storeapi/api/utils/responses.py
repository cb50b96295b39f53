# storeapi/api/utils/responses.py
from __future__ import annotations

from flask import current_app, jsonify, request

from storeapi.errors import StoreError, ValidationError
from storeapi.extensions import db

_MISSING = object()


def envelope(message: str, data=_MISSING, error: str | None = None, status: int = 200):
    """Build the ``{"Message", "Data"?, "Error"?}`` body every endpoint returns."""
    body = {"Message": message}
    if data is not _MISSING:
        body["Data"] = data
    if error is not None:
        body["Error"] = error
    return jsonify(body), status


def rejected(exc: StoreError):
    """Expected client error: log a warning and answer with the class's status."""
    current_app.logger.warning(
        "[%s %s] rejected with %s: %s",
        request.method,
        request.path,
        exc.status_code,
        exc.message,
    )
    return envelope(exc.message, status=exc.status_code)


def failed(exc: Exception, action: str):
    """Unexpected failure: roll back, log the traceback, expose the message."""
    db.session.rollback()
    current_app.logger.exception("[%s %s] %s failed", request.method, request.path, action)
    return envelope(f"An error occurred while {action}", error=str(exc), status=500)


def get_payload() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict() if request.form else None
    if data is None:
        raise ValidationError("Request body is missing")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
