"""
Error taxonomy raised by the service layer.

Every error carries the HTTP status and public message it maps to; the Flask
error handlers in api.errors turn them into the response envelope.
"""
from __future__ import annotations

from typing import List, Optional


class ServiceError(Exception):
    status_code = 500
    message = "Something went wrong"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.errors = errors


class ValidationError(ServiceError):
    status_code = 400
    message = "Validation error"


class ConflictError(ServiceError):
    status_code = 400
    message = "Email or username already exists"


class AuthenticationError(ServiceError):
    status_code = 401
    message = "Invalid email or password"


class InvalidTokenError(ServiceError):
    status_code = 401
    message = "Invalid refresh token"


class ExpiredOrInvalidTokenError(ServiceError):
    status_code = 401
    message = "Refresh token expired or invalid"


class MissingTokenError(ServiceError):
    status_code = 401
    message = "Access token required"


class ForbiddenError(ServiceError):
    status_code = 403
    message = "Access token is invalid or expired"


class NotFoundError(ServiceError):
    status_code = 404
    message = "Resource not found"


def flatten_messages(messages, prefix: str = "") -> List[str]:
    """Flatten marshmallow's {field: [msg, ...]} mapping into "field: msg" strings."""
    if isinstance(messages, str):
        return [f"{prefix}: {messages}" if prefix else messages]
    if isinstance(messages, dict):
        out = []
        for key, value in messages.items():
            name = f"{prefix}.{key}" if prefix else str(key)
            out.extend(flatten_messages(value, name))
        return out
    out = []
    for value in messages:
        out.extend(flatten_messages(value, prefix))
    return out
