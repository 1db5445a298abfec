"""Classification of transport failures into the client's error taxonomy."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import requests


class FailureKind(enum.Enum):
    """What went wrong with a request, in order of precedence."""

    CLIENT_ERROR_RESPONSE = "client error"
    SERVER_ERROR_RESPONSE = "server error"
    OTHER_WITH_RESPONSE = "request error"
    OTHER_WITHOUT_RESPONSE = "no response"


@dataclass(frozen=True)
class RequestFailure:
    """A classified transport failure.

    ``message`` is what gets logged: the reason phrase for HTTP status
    errors, otherwise the exception's own text.
    """

    kind: FailureKind
    message: str
    response: requests.Response | None = None

    @property
    def has_response(self) -> bool:
        return self.response is not None

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


def classify(err: requests.RequestException) -> RequestFailure:
    """Map a ``requests`` exception to a :class:`RequestFailure`.

    The first matching rule wins:
        1. ``HTTPError`` with a 4xx response.
        2. ``HTTPError`` with a 5xx response.
        3. Any other failure that still carries a response.
        4. Failures without a response.
    """
    response = err.response
    if response is None:
        return RequestFailure(FailureKind.OTHER_WITHOUT_RESPONSE, str(err))

    if isinstance(err, requests.HTTPError):
        status = response.status_code
        if 400 <= status < 500:
            return RequestFailure(
                FailureKind.CLIENT_ERROR_RESPONSE, response.reason or "", response
            )
        if 500 <= status < 600:
            return RequestFailure(
                FailureKind.SERVER_ERROR_RESPONSE, response.reason or "", response
            )

    return RequestFailure(FailureKind.OTHER_WITH_RESPONSE, str(err), response)
