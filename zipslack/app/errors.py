"""Errors raised by the resource services.

Each error carries the entity name and an error key; the HTTP layer turns
them into a JSON body plus the ``X-<app>-error`` / ``X-<app>-params`` headers.
"""


class ZipslackError(Exception):
    status_code = 500

    def __init__(self, message: str, entity_name: str, error_key: str) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


class ValidationError(ZipslackError):
    """Caller-fixable problem with the request (400)."""

    status_code = 400


class ConflictError(ValidationError):
    """A new entity arrived with an identifier already set."""


class NotFoundError(ZipslackError):
    status_code = 404
