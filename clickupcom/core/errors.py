"""Error taxonomy for API requests.

Every failure the request client can classify becomes one of these
classes. Anything it cannot classify is re-raised unchanged.
"""

from __future__ import annotations


class ClickUpCLIError(Exception):
    """Base class for all classified request failures."""

    default_message = "Request failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class UnconfiguredError(ClickUpCLIError):
    """No API key stored for a client that requires one."""

    default_message = "No API key configured. Please run: clickupcom config set --api-key <key>"


class AuthenticationError(ClickUpCLIError):
    """HTTP 401."""

    default_message = "Authentication failed. Check your API key."


class AuthorizationError(ClickUpCLIError):
    """HTTP 403."""

    default_message = "Access forbidden. Check your permissions."


class NotFoundError(ClickUpCLIError):
    """HTTP 404."""

    default_message = "Resource not found."


class RateLimitError(ClickUpCLIError):
    """HTTP 429."""

    default_message = "Rate limit exceeded. Please wait before retrying."


class APIError(ClickUpCLIError):
    """Any other non-2xx response."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API Error ({status_code}): {detail}")


class ConnectivityError(ClickUpCLIError):
    """The request was sent but no response came back."""

    def __init__(self, service: str = "ClickUp API"):
        self.service = service
        super().__init__(f"No response from {service}. Check your internet connection.")


STATUS_ERRORS: dict[int, type[ClickUpCLIError]] = {
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    429: RateLimitError,
}
