"""Tick API client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import requests

from . import _serialization
from ._classify import FailureKind, RequestFailure, classify
from .const import CONTENT_TYPE_JSON, ENDPOINT_SUFFIX, HEADER_CONTENT_TYPE
from .exceptions import ApiError, GenericFailure
from .models import ApiConfig, ClientIdentity

_LOGGER = logging.getLogger(__name__)

_FAILURE_SUFFIX: dict[FailureKind, str] = {
    FailureKind.CLIENT_ERROR_RESPONSE: ", server returned client error: %(code)s : %(message)s",
    FailureKind.SERVER_ERROR_RESPONSE: ", server returned server error: %(code)s : %(message)s",
    FailureKind.OTHER_WITH_RESPONSE: ", server return: %(code)s : %(message)s",
    FailureKind.OTHER_WITHOUT_RESPONSE: ", server return : %(message)s",
}


class TickClient(Protocol):
    """The request surface offered by :class:`TickApiClient`."""

    def get(self, endpoint: str, query_params: Mapping[str, Any] | None = None) -> Any: ...

    def post(self, endpoint: str, data: Any) -> Any: ...

    def put(self, endpoint: str, data: Any) -> requests.Response: ...

    def delete(self, endpoint: str) -> requests.Response: ...


class TickApiClient:
    """Synchronous client for the Tick time-tracking API.

    Usage::

        client = TickApiClient.create("12345", "token", "Acme", "me@acme.test")
        projects = client.get("projects")
        client.post("entries", {"date": "2026-10-19", "hours": 2, "task_id": 7})

    The session passed to the constructor is shared: the caller keeps
    ownership and closes it. Clients built with :meth:`create` own theirs
    and close it in :meth:`close` (or when used as a context manager).

    Every failed call is logged once on the given logger and then raised:
        ApiError: The server answered with an error response.
        GenericFailure: No response was received at all.
    """

    def __init__(
        self,
        session: requests.Session,
        identity: ClientIdentity,
        *,
        config: ApiConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._session = session
        self._identity = identity
        self._config = config or ApiConfig()
        self._logger = logger or _LOGGER
        self._owns_session = False
        self._headers = identity.headers()
        self._api_url = self._config.api_url(identity.subscription_id)

    @classmethod
    def create(
        cls,
        subscription_id: str,
        access_token: str,
        company: str,
        email: str,
        *,
        config: ApiConfig | None = None,
    ) -> TickApiClient:
        """Build a client with its own session and the module logger."""
        identity = ClientIdentity(subscription_id, access_token, company, email)
        session = requests.Session()
        session.headers.update(identity.headers())
        client = cls(session, identity, config=config)
        client._owns_session = True
        return client

    def __enter__(self) -> TickApiClient:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    @property
    def identity(self) -> ClientIdentity:
        return self._identity

    @property
    def api_url(self) -> str:
        """``<base>/<subscription id>/api/v2/``."""
        return self._api_url

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def url_for(self, endpoint: str) -> str:
        """Full URL of an endpoint; the endpoint is used verbatim."""
        return f"{self._api_url}{endpoint}{ENDPOINT_SUFFIX}"

    def close(self) -> None:
        """Close the HTTP session if the client owns it."""
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------ #
    #  Verbs
    # ------------------------------------------------------------------ #

    def get(self, endpoint: str, query_params: Mapping[str, Any] | None = None) -> Any:
        """GET an endpoint and return its decoded JSON body."""
        params = dict(query_params or {})
        response = self._request("GET", endpoint, {"params": params}, params=params)
        return _serialization.decode(response.content)

    def post(self, endpoint: str, data: Any) -> Any:
        """POST a JSON payload and return the decoded JSON body."""
        response = self._request(
            "POST",
            endpoint,
            {"params": data},
            headers={HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON},
            data=_serialization.encode(data),
        )
        return _serialization.decode(response.content)

    def put(self, endpoint: str, data: Any) -> requests.Response:
        """PUT a JSON payload and return the raw response."""
        return self._request(
            "PUT",
            endpoint,
            {"params": data},
            headers={HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON},
            data=_serialization.encode(data),
        )

    def delete(self, endpoint: str) -> requests.Response:
        """DELETE an endpoint and return the raw response."""
        return self._request("DELETE", endpoint, {})

    # ------------------------------------------------------------------ #
    #  Internal HTTP layer
    # ------------------------------------------------------------------ #

    def _request(
        self,
        method: str,
        endpoint: str,
        logged: dict[str, Any],
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Send one request and translate any failure.

        ``logged`` holds the request fields that go into the failure log
        besides the method and endpoint.

        Raises:
            ApiError: On 4xx/5xx responses and other failures with a response.
            GenericFailure: When no response was received.
        """
        try:
            response = self._session.request(
                method,
                self.url_for(endpoint),
                headers={**self._headers, **(headers or {})},
                **kwargs,
            )
            response.raise_for_status()
        except requests.RequestException as err:
            failure = classify(err)
            self._log_failure(method, endpoint, logged, failure)
            if failure.response is None:
                raise GenericFailure() from None
            raise ApiError(failure.response) from err
        return response

    def _log_failure(
        self,
        method: str,
        endpoint: str,
        logged: dict[str, Any],
        failure: RequestFailure,
    ) -> None:
        template = "Error trying to request %(method)s: %(endpoint)s"
        if "params" in logged:
            template += " %(params)s"
        template += _FAILURE_SUFFIX[failure.kind]

        fields: dict[str, Any] = {"method": method, "endpoint": endpoint, **logged}
        if failure.has_response:
            fields["code"] = failure.status_code
        fields["message"] = failure.message
        self._logger.error(template, fields)
