"""HTTP dispatchers: the single place where Gorse requests hit the network.

Each ``send`` performs exactly one request. There are no retries, no caching
and no fallback; every failure is raised as a ``GorseError``.
"""

import logging
from typing import Any

import httpx

from gorse_client.adapters.http.request import ApiRequest, JSONValue, decode_response
from gorse_client.errors import GorseConnectionError, GorseTimeoutError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


class _BaseDispatcher:
    def __init__(self, endpoint: str, api_key: str) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._api_key = api_key

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def _request_kwargs(self, request: ApiRequest) -> dict[str, Any]:
        return {
            "method": request.method,
            "url": self._endpoint + request.target,
            "headers": {API_KEY_HEADER: self._api_key, "Accept": "application/json"},
            "json": request.body,
        }

    @staticmethod
    def _transport_error(request: ApiRequest, exc: httpx.RequestError) -> GorseConnectionError:
        reason = str(exc) or type(exc).__name__
        if isinstance(exc, httpx.TimeoutException):
            return GorseTimeoutError(request.method, request.target, reason)
        return GorseConnectionError(request.method, request.target, reason)

    def _decode(self, request: ApiRequest, response: httpx.Response) -> JSONValue:
        logger.debug(
            "Gorse response: %s %s -> %d (%d bytes)",
            request.method,
            request.target,
            response.status_code,
            len(response.content),
        )
        return decode_response(request, response)


class Dispatcher(_BaseDispatcher):
    """Blocking dispatcher backed by a reusable ``httpx.Client``."""

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(endpoint, api_key)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    def send(self, request: ApiRequest) -> JSONValue:
        """Execute ``request`` and return the decoded JSON payload."""
        logger.debug("Gorse request: %s %s", request.method, request.target)
        try:
            response = self._client.request(**self._request_kwargs(request))
        except httpx.RequestError as exc:
            raise self._transport_error(request, exc) from exc
        return self._decode(request, response)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class AsyncDispatcher(_BaseDispatcher):
    """asyncio dispatcher backed by a reusable ``httpx.AsyncClient``."""

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(endpoint, api_key)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def send(self, request: ApiRequest) -> JSONValue:
        """Execute ``request`` and return the decoded JSON payload."""
        logger.debug("Gorse request: %s %s", request.method, request.target)
        try:
            response = await self._client.request(**self._request_kwargs(request))
        except httpx.RequestError as exc:
            raise self._transport_error(request, exc) from exc
        return self._decode(request, response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
