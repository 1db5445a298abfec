"""Configuration and identity values for the Tick API client."""

from __future__ import annotations

from dataclasses import dataclass

from .const import (
    API_PATH,
    AUTHORIZATION_TEMPLATE,
    BASE_URL,
    HEADER_AUTHORIZATION,
    HEADER_USER_AGENT,
    USER_AGENT_TEMPLATE,
)


@dataclass(frozen=True)
class ApiConfig:
    """Where the API lives.

    ``base_url`` must end with a slash; ``api_path`` is placed right after the
    subscription id, so it starts and ends with one.
    """

    base_url: str = BASE_URL
    api_path: str = API_PATH

    def api_url(self, subscription_id: str) -> str:
        """Root URL for every endpoint of one subscription."""
        return f"{self.base_url}{subscription_id}{self.api_path}"


@dataclass(frozen=True)
class ClientIdentity:
    """Credentials and contact details of the calling user.

    Values are kept as given (after ``str`` coercion); empty strings are
    accepted and only fail once a request reaches the server.
    """

    subscription_id: str
    access_token: str
    company: str
    email: str

    def __post_init__(self) -> None:
        # Subscription ids are frequently passed as ints.
        for name in ("subscription_id", "access_token", "company", "email"):
            object.__setattr__(self, name, str(getattr(self, name)))

    @property
    def user_agent(self) -> str:
        return USER_AGENT_TEMPLATE.format(company=self.company, email=self.email)

    @property
    def authorization(self) -> str:
        return AUTHORIZATION_TEMPLATE.format(access_token=self.access_token)

    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            HEADER_USER_AGENT: self.user_agent,
            HEADER_AUTHORIZATION: self.authorization,
        }
