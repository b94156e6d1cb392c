"""HTTP transport used by the domain operations.

The transport performs exactly one request per call: no retries, no timeout
unless one is configured.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

import httpx

from client.exceptions import TransportError
from common.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of a completed request."""

    status_code: int
    content: bytes = b''
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """Anything able to issue a single HTTP request and return status and body."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        content: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        ...

    async def aclose(self) -> None:
        ...


class HttpxTransport:
    """Transport backed by httpx.AsyncClient."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the transport.

        Args:
            client: Preconfigured AsyncClient (tests pass one with a MockTransport)
            timeout: Request timeout in seconds, None for no timeout
            headers: Extra headers sent with every request
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, headers=dict(headers or {}))

    async def request(
        self,
        method: str,
        url: str,
        *,
        content: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """
        Send one request.

        Args:
            method: HTTP method (GET, PUT, DELETE, POST)
            url: Absolute URL including the already-encoded query string
            content: Raw request body
            headers: Per-request headers

        Returns:
            TransportResponse with status code and body

        Raises:
            TransportError: On connection-level failures, invalid URLs or any
                other failure raised while sending
        """
        try:
            response = await self._client.request(
                method,
                url,
                content=content,
                headers=dict(headers) if headers else None,
            )
        except httpx.HTTPError as e:
            logger.error(f"Transport failure: {method} {url} error={type(e).__name__}")
            raise TransportError(f"{method} request failed: {e}", cause=e) from e
        except Exception as e:
            logger.error(f"Unexpected transport failure: {method} {url} error={type(e).__name__}", exc_info=True)
            raise TransportError(f"{method} request failed: {e}", cause=e) from e

        logger.debug(f"Response: {method} {url} status={response.status_code}")
        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
