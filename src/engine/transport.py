"""
Transport contract and the httpx-backed implementation.

The engine only ever calls get() or post() once per tool call; retries,
session handling and authentication are left to whoever wraps the transport.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

import httpx

from common.logging import get_logger

from .errors import TransportError

logger = get_logger(__name__)

# Bytes of a failed response body included in the error message
ERROR_PREVIEW_LENGTH = 200


class TransportClient(ABC):
    """Executes outbound requests against the backend."""

    @abstractmethod
    async def get(self, path: str) -> bytes:
        """Issue a GET for path (including query string) and return the raw body."""
        pass

    @abstractmethod
    async def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> bytes:
        """Issue a POST for path with an optional JSON object body."""
        pass


class HttpTransport(TransportClient):
    """
    TransportClient over httpx.AsyncClient.

    Paths produced by the request builder are appended verbatim to base_url,
    since they already carry an encoded query string.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        headers: Optional[Mapping[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            verify=verify_ssl,
            headers={"Accept": "application/json", **dict(headers or {})},
        )

        logger.info(
            event="http_transport_initialized",
            timeout=timeout,
            verify_ssl=verify_ssl,
        )

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return self.base_url + path

    async def get(self, path: str) -> bytes:
        return await self._send("GET", path)

    async def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> bytes:
        return await self._send("POST", path, body)

    async def _send(
        self, method: str, path: str, body: Optional[Dict[str, Any]] = None
    ) -> bytes:
        url = self._url(path)
        try:
            if body is None:
                response = await self._client.request(method, url)
            else:
                response = await self._client.request(method, url, json=body)
        except httpx.HTTPError as e:
            logger.warning(event="http_request_failed", method=method, error=type(e).__name__)
            raise TransportError(
                f"request failed: {str(e) or type(e).__name__}",
                details={"method": method, "path": path},
            ) from e

        if response.is_error:
            preview = response.text[:ERROR_PREVIEW_LENGTH].strip()
            message = f"HTTP {response.status_code}"
            if preview:
                message = f"{message}: {preview}"
            logger.warning(
                event="http_request_rejected",
                method=method,
                status_code=response.status_code,
            )
            raise TransportError(
                message,
                status_code=response.status_code,
                details={"method": method, "path": path},
            )

        return response.content

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()
