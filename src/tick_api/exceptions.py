"""Exception hierarchy for the Tick API client."""

from __future__ import annotations

import requests

from .const import GENERIC_FAILURE_MESSAGE


class TickError(Exception):
    """Base exception for all Tick API errors."""


class ApiError(TickError):
    """The API answered, but with an error response.

    Attributes:
        response: The full HTTP response (status, headers, body).
    """

    def __init__(self, response: requests.Response) -> None:
        super().__init__(f"API error: HTTP {response.status_code} {response.reason or ''}".rstrip())
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def reason(self) -> str | None:
        return self.response.reason


class GenericFailure(TickError):
    """No response was received (network error, DNS, timeout).

    The underlying cause is not kept; the message is always the same.
    """

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
