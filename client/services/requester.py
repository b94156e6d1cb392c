"""Shared request plumbing for the domain operations."""

from typing import Mapping, Optional

from client.error_mapper import ErrorTable, raise_for_status
from client.transport import Transport, TransportResponse
from common.logging_config import get_logger

logger = get_logger(__name__)


class Requester:
    """Sends requests for the domain operations through one transport and host."""

    def __init__(self, transport: Transport, host: str):
        self.transport = transport
        self.host = host

    async def send(
        self,
        operation: str,
        method: str,
        url: str,
        errors: ErrorTable,
        content: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """
        Issue one request and map a non-2xx status through `errors`.

        Args:
            operation: Operation name for messages and logs
            method: HTTP method
            url: Absolute URL with query string
            errors: The operation's status -> error table
            content: Raw request body
            headers: Per-request headers

        Returns:
            The successful response
        """
        logger.debug(f"{operation}: {method} {url}")
        response = await self.transport.request(method, url, content=content, headers=headers)
        raise_for_status(operation, response, errors)
        return response
