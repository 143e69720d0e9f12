"""
SecondChance Auth API - Authentication Errors

Typed failures raised by the credential workflow. Caller-input failures are
recoverable rejections; HashingError and StoreError come from infrastructure.
"""

from typing import Optional


class AuthError(Exception):
    """Base class for every failure of the credential workflow."""

    message: str = "Authentication error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateEmail(AuthError):
    message = "Email id already exists"


class UserNotFound(AuthError):
    message = "User not found"


class InvalidCredentials(AuthError):
    message = "Wrong password"


class MissingIdentifier(AuthError):
    message = "Email not found in the request headers"


class ValidationError(AuthError):
    """Input rejected by a field policy. ``errors`` lists each failed field."""

    message = "Validation failed"

    def __init__(self, errors: list[dict], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors


class HashingError(AuthError):
    message = "Password hashing failed"


class StoreError(AuthError):
    message = "User store operation failed"


class EmailConflictError(StoreError):
    """The store rejected an insert because the email is already taken."""

    message = "Email violates the unique index"


class ConfigurationError(RuntimeError):
    """Process-wide configuration is missing or unusable."""
