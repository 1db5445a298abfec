"""Shared fixtures: a stand-in transport and real ``requests`` responses.

The client only ever calls ``session.request(...)``, so a ``MagicMock``
constrained to ``requests.Session`` is enough to drive every code path
without touching the network.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from tick_api import ApiConfig, ClientIdentity, TickApiClient

MOCK_BASE_URL = "https://tick.example.test/"

_REASONS = {
    200: "OK",
    201: "Created",
    204: "No Content",
    302: "Found",
    404: "Not Found",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def make_response(
    status: int = 200,
    body: Any = None,
    *,
    reason: str | None = None,
    url: str = MOCK_BASE_URL,
) -> requests.Response:
    """Build a real ``requests.Response`` without a network round trip."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason if reason is not None else _REASONS.get(status, "")
    response.url = url
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json; charset=utf-8"
    return response


@pytest.fixture
def identity() -> ClientIdentity:
    return ClientIdentity(
        subscription_id="12345",
        access_token="abc123",
        company="Acme",
        email="dev@acme.test",
    )


@pytest.fixture
def config() -> ApiConfig:
    return ApiConfig(base_url=MOCK_BASE_URL)


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("tests.tick_api")


@pytest.fixture
def client(session, identity, config, logger) -> TickApiClient:
    return TickApiClient(session, identity, config=config, logger=logger)
