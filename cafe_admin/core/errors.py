"""
Error taxonomy shared by services and the HTTP layer.

Every error carries the HTTP status the gateway answers with and the message
placed in the ``{success: false, message}`` envelope.
"""
from fastapi import status


class CafeError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CafeError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class AuthError(CafeError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidCredentials(AuthError):
    default_message = "Invalid credentials"


class Unauthorized(AuthError):
    default_message = "Unauthorized"


class NotFound(CafeError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageError(CafeError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Database error"
