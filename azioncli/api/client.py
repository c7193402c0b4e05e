"""
HTTP Client for the Azion APIs.

Provides the async HTTP client shared by every resource client, and the
single place where transport failures and error statuses are turned into
application exceptions.

Every request carries the token, the versioned Accept header and the
Azion_CLI User-Agent.
"""

import json
from typing import Any

import httpx

from azioncli.core.config import get_api_base_url, get_app_config, get_settings, get_user_agent
from azioncli.core.exceptions import (
    ApplicationError,
    InternalServerError,
    NotFoundError,
    RequestError,
)
from azioncli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def classify_response(response: httpx.Response, resource: str) -> httpx.Response:
    """
    Map an error status to the matching exception, or return the response.

    Server-side failures (>= 500) never expose the body. Every other
    non-2xx status, redirects included, carries the raw body for diagnostics.
    """
    status = response.status_code
    if status >= 500:
        raise InternalServerError(resource)
    if status == 404:
        raise NotFoundError(f"{resource} not found", body=response.text)
    if not response.is_success:
        raise RequestError(
            f"{resource} request failed with status {status}",
            status_code=status,
            body=response.text,
        )
    return response


class APIClient:
    """
    HTTP client for one Azion API base URL.

    Features:
    - Base URL, timeout and token from settings unless given
    - Authorization, Accept and User-Agent headers on every request
    - Structured logging of requests/responses
    - Transport errors and error statuses mapped to ApplicationError

    Usage:
        client = APIClient(base_url="https://api.azionapi.net", token="...")
        data = await client.request_json("GET", "/edge_functions/1", resource="edge function")
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        api_name: str = "edge_functions",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API base URL. If None, read from application.yaml.
            token: API token. If None, read from AZIONCLI_TOKEN.
            timeout: Request timeout in seconds. If None, read from application.yaml.
            api_name: Which configured API to use when base_url is None.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        if base_url is None or timeout is None:
            config_base_url, config_timeout = get_api_base_url(api_name)
            base_url = base_url or config_base_url
            timeout = timeout if timeout is not None else config_timeout
        if token is None:
            token = get_settings().require_token()

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _headers(self) -> dict[str, str]:
        api = get_app_config().application.api
        return {
            "Authorization": f"token {self._token}",
            "Accept": api.accept,
            "User-Agent": get_user_agent(),
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self._headers(),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        resource: str = "resource",
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request and classify the outcome.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path relative to the base URL
            resource: Resource name used in error messages
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response with a success status

        Raises:
            InternalServerError: No response, or status >= 500
            NotFoundError: Status 404
            RequestError: Any other error status
        """
        client = await self._get_client()

        log_with_source(logger, "api", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise InternalServerError(resource) from e

        log_with_source(
            logger,
            "api",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return classify_response(response, resource)

    async def request_json(
        self,
        method: str,
        path: str,
        resource: str = "resource",
        **kwargs: Any,
    ) -> Any:
        """Make a request and decode the JSON body of the success response."""
        response = await self.request(method, path, resource=resource, **kwargs)
        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise ApplicationError(
                f"Unexpected response from {resource} API: {response.text}",
                code="SYS_BAD_RESPONSE",
            ) from e


# Module-level clients, one per configured API
_clients: dict[str, APIClient] = {}


def get_api_client(api_name: str) -> APIClient:
    """Get or create the API client for the named API."""
    if api_name not in _clients:
        _clients[api_name] = APIClient(api_name=api_name)
    return _clients[api_name]


def set_api_client(api_name: str, client: APIClient) -> None:
    """Register a preconfigured client for the named API."""
    _clients[api_name] = client


async def close_api_clients() -> None:
    """Close and forget every API client."""
    for client in list(_clients.values()):
        await client.close()
    _clients.clear()
