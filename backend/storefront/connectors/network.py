"""
Network layer for the storefront REST API

Handles:
- Request description (method, path, query, JSON body)
- Authenticated HTTP transport over httpx

Author: TM3
Date: 2026-10-19
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import httpx

from storefront.core.config import get_settings
from storefront.core.exceptions import NetworkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    """
    One API call

    Args:
        method: HTTP method (GET, POST, PUT)
        path: Endpoint path relative to the API base, e.g. 'sites/123/orders'
        parameters: Query string parameters
        body: JSON body for POST / PUT
    """

    method: str
    path: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None


class Network(Protocol):
    """Transport used by Remotes. Returns the raw response body."""

    async def response_data(self, request: Request) -> bytes:
        ...


class HttpxNetwork:
    """
    Network implementation backed by httpx.AsyncClient

    Non-2xx replies are returned as-is so the Remote can decode the error
    envelope. Transport failures and empty bodies raise NetworkError.
    """

    def __init__(self, base_url: str = None, token: str = None, timeout: float = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the network

        Args:
            base_url: API base URL (defaults to settings.API_BASE_URL)
            token: Bearer token (defaults to settings.API_TOKEN)
            timeout: Request timeout in seconds (defaults to settings.API_TIMEOUT)
            transport: Custom httpx transport (tests)
        """
        config = get_settings()
        self.base_url = (base_url or config.API_BASE_URL).rstrip('/') + '/'
        self.token = token if token is not None else config.API_TOKEN
        self.timeout = timeout or config.API_TIMEOUT
        self._transport = transport
        self.api_calls = 0

    def _headers(self) -> Dict[str, str]:
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    async def response_data(self, request: Request) -> bytes:
        url = f"{self.base_url}{request.path.lstrip('/')}"
        logger.debug(f"{request.method} {url} params={request.parameters}")

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                response = await client.request(
                    request.method,
                    url,
                    params=request.parameters or None,
                    json=request.body,
                    headers=self._headers(),
                )
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.error(f"API request error: {request.method} {url}: {e}")
                raise NetworkError(f"Transport failure: {e}") from e

        self.api_calls += 1

        if not response.content:
            raise NetworkError("Empty response", status_code=response.status_code)

        if response.is_error:
            logger.warning(f"API request failed: {response.status_code} - {url}")

        return response.content
