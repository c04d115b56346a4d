"""
Exceptions - Client error taxonomy and server API errors.

Client side (raised by identity service and session store adapters, absorbed by the
SessionController):
- TransportError: the request never produced a response
- ServiceRejectedError: non-2xx response with a server message
- MalformedResponseError: wrong content type or missing fields
- InvalidUserError: identity payload without valid name fields
- SessionStoreError: a session store could not write the credential

Server side (rendered as {"message": ...} JSON by the API):
- AccountExistsError (409)
- InvalidCredentialsError (401)
- AuthenticationRequiredError (401)
"""

from typing import Any, Dict, Optional


class SessionServiceError(Exception):
    """Base class for failures talking to the identity service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(SessionServiceError):
    """Network-level failure (connection refused, timeout, protocol error)."""


class ServiceRejectedError(SessionServiceError):
    """The service answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(SessionServiceError):
    """The response could not be interpreted (content type, shape)."""


class InvalidUserError(MalformedResponseError):
    """Identity payload is missing a required name field."""

    def __init__(self, field_name: str):
        super().__init__(f"User payload is missing a valid '{field_name}'")
        self.field_name = field_name


class SessionStoreError(Exception):
    """The session store could not persist a credential."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class APIError(Exception):
    """
    Base exception for the HTTP API.

    Carries the status code and the human-readable message that is sent
    back to the client as {"message": ...}.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response body."""
        return {"message": self.message}


class AccountExistsError(APIError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str):
        super().__init__(
            message="Username already exists",
            status_code=409,
            details={"username": username},
        )


class InvalidCredentialsError(APIError):
    """Raised when a username/password pair does not match."""

    def __init__(self):
        super().__init__(message="Invalid username or password", status_code=401)


class AuthenticationRequiredError(APIError):
    """Raised when a request lacks a usable bearer token."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message=message, status_code=401)
