from __future__ import annotations


class StoreError(Exception):
    """Base class for failures raised by the document store and the admin gate."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(StoreError):
    status_code = 404


class AuthFailure(StoreError):
    status_code = 401


class IOFailure(StoreError):
    """Underlying storage read/write failed; carries the original message."""

    status_code = 500


class ValidationFailure(StoreError):
    status_code = 400
