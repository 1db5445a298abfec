"""Constants for the Tick API client."""

__version__ = "0.1.0"

BASE_URL = "https://www.tickspot.com/"
API_PATH = "/api/v2/"
ENDPOINT_SUFFIX = ".json"

HEADER_USER_AGENT = "User-Agent"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

USER_AGENT_TEMPLATE = "{company}({email})"
AUTHORIZATION_TEMPLATE = "Token token={access_token}"
CONTENT_TYPE_JSON = "application/json; charset=utf-8"

GENERIC_FAILURE_MESSAGE = "Something went wrong"
