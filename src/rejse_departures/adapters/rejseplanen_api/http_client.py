"""HTTP client for Rejseplanen API requests.

API Documentation: https://labs.rejseplanen.dk/
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import SecretStr

from rejse_departures.adapters.api_request_logger import log_api_request
from rejse_departures.adapters.rejseplanen_api.constants import (
    ACCESS_ID_PARAM,
    DEFAULT_HEADERS,
    REJSEPLANEN_BASE_URL,
)
from rejse_departures.domain.models.errors import (
    GatewayTransportError,
    MissingCredentialError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


def merge_params(
    defaults: dict[str, Any], params: dict[str, Any] | None = None
) -> dict[str, str]:
    """Overlay caller parameters on the defaults, dropping unset values.

    Caller values win for any field both supply.
    """
    merged = {**defaults, **(params or {})}
    return {key: str(value) for key, value in merged.items() if value is not None}


class RejseplanenHttpClient:
    """HTTP client that signs every request with the configured access id."""

    def __init__(
        self,
        session: "ClientSession",
        access_token: SecretStr | str | None,
        base_url: str = REJSEPLANEN_BASE_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for all requests.
            access_token: Rejseplanen access id. Requests fail without one.
            base_url: API base URL.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        if isinstance(access_token, str):
            access_token = SecretStr(access_token)
        self._access_token = access_token
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _signed(self, params: dict[str, str]) -> dict[str, str]:
        """Add the access id; it always overrides caller input."""
        token = self._access_token.get_secret_value() if self._access_token else ""
        if not token:
            raise MissingCredentialError("ACCESS_TOKEN is not configured")
        return {**params, ACCESS_ID_PARAM: token}

    async def _read_json(self, response: "ClientResponse", url: str) -> Any:
        """Return the decoded body or raise UpstreamError."""
        if response.status != 200:
            error_text = await response.text()
            logger.error(
                f"Rejseplanen API returned status {response.status} for {url}: "
                f"{error_text[:200] if error_text else '(empty response body)'}"
            )
            raise UpstreamError(f"Response status: {response.status}", response.status)

        try:
            return await response.json(content_type=None)
        except ValueError as e:
            logger.error(f"Rejseplanen API returned a malformed body for {url}: {e}")
            raise UpstreamError(f"Malformed response body: {e}", response.status) from e

    async def get_json(
        self,
        path: str,
        defaults: dict[str, Any],
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET an endpoint with default parameters overlaid by the caller's.

        Args:
            path: Endpoint path relative to the base URL.
            defaults: Endpoint default parameters.
            params: Caller parameters, taking precedence over defaults.

        Returns:
            Decoded JSON body.

        Raises:
            MissingCredentialError: If no access id is configured.
            UpstreamError: On non-success status or malformed body.
            GatewayTransportError: If the request cannot complete.
        """
        url = self._url(path)
        query = self._signed(merge_params(defaults, params))
        log_api_request("GET", url, params=query, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, params=query, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._read_json(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error calling Rejseplanen API {url}: {type(e).__name__}: {e}")
            raise GatewayTransportError(f"Request to {url} failed: {e}") from e
