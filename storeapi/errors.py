"""
Domain errors raised by the repositories and the API views.

The views translate each class into a status code; anything that is not a
``StoreError`` is treated as unexpected and reported as a 500.
"""
from __future__ import annotations


class StoreError(Exception):
    """Base class for expected failures that map onto a client error."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    """The addressed entity does not exist."""

    status_code = 404


class ConflictError(StoreError):
    """A unique name or a wishlist membership already exists."""

    status_code = 409


class ValidationError(StoreError):
    """Malformed input, or a body id that disagrees with the path id."""

    status_code = 400
