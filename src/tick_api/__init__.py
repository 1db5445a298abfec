"""Python client for the Tick time-tracking API."""

from .const import __version__
from ._classify import FailureKind, RequestFailure, classify
from ._client import TickApiClient, TickClient
from .exceptions import ApiError, GenericFailure, TickError
from .models import ApiConfig, ClientIdentity

__all__ = [
    "__version__",
    "TickApiClient",
    "TickClient",
    "ApiConfig",
    "ClientIdentity",
    "ApiError",
    "GenericFailure",
    "TickError",
    "FailureKind",
    "RequestFailure",
    "classify",
]
