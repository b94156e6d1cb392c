"""Async client for the container storage service."""

from typing import Any, Callable, List, Mapping, Optional, TypeVar

from client.codec import decode_bytes
from client.schemas import ContainerInfo, FullInfo, Report, ReportInfo, Token
from client.services import ContainerService, FileService, ReportService, Requester, TokenService
from client.transport import HttpxTransport, Transport
from common.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


class StorageClient:
    """
    One coroutine per service operation.

    Every call is an independent request; any number may run concurrently.
    A call either returns its typed value or raises exactly one of the
    StorageServiceError subclasses.

    Example:
        async with StorageClient("box.example.com") as client:
            container = await client.new_container(token, password="secret")
            await client.put_file(container.id, "docs/a.txt", b"hi", password="secret")
    """

    def __init__(
        self,
        host: str,
        *,
        timeout: Optional[float] = None,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize the client.

        Args:
            host: Service host, with or without scheme (https is assumed)
            timeout: Request timeout in seconds, None for no timeout
            headers: Extra headers for every request
            transport: Custom transport; an httpx-backed one is created otherwise
        """
        self.host = host
        self.transport = transport or HttpxTransport(timeout=timeout, headers=headers)
        requester = Requester(self.transport, host)
        self.containers = ContainerService(requester)
        self.files = FileService(requester)
        self.tokens = TokenService(requester)
        self.reports = ReportService(requester)
        logger.debug(f"Initialized StorageClient [host={host}]")

    async def __aenter__(self) -> 'StorageClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def get_container(self, container_id: str, password: Optional[str] = None) -> ContainerInfo:
        return await self.containers.get_container(container_id, password)

    async def new_container(self, token: str, password: Optional[str] = None) -> FullInfo:
        return await self.containers.new_container(token, password)

    async def get_file(
        self,
        container_id: str,
        path: str,
        password: Optional[str] = None,
        decoder: Callable[[bytes], T] = decode_bytes,
    ) -> T:
        return await self.files.get_file(container_id, path, password, decoder=decoder)

    async def get_file_json(self, container_id: str, path: str, password: Optional[str] = None) -> Any:
        return await self.files.get_file_json(container_id, path, password)

    async def get_file_text(self, container_id: str, path: str, password: Optional[str] = None) -> str:
        return await self.files.get_file_text(container_id, path, password)

    async def put_file(
        self,
        container_id: str,
        path: str,
        content: bytes,
        password: Optional[str] = None,
    ) -> None:
        await self.files.put_file(container_id, path, content, password)

    async def delete_file(self, container_id: str, path: str, password: Optional[str] = None) -> None:
        await self.files.delete_file(container_id, path, password)

    async def get_token(self, token_id: str) -> Token:
        return await self.tokens.get_token(token_id)

    async def new_token(
        self,
        parent: str,
        token_limit: int,
        storage_limit: int,
        hint: Optional[str] = None,
    ) -> Token:
        return await self.tokens.new_token(parent, token_limit, storage_limit, hint)

    async def get_reports(
        self,
        container_id: Optional[str] = None,
        path: Optional[str] = None,
    ) -> List[ReportInfo]:
        return await self.reports.get_reports(container_id, path)

    async def post_report(
        self,
        container_id: str,
        report: Report,
        password: Optional[str] = None,
    ) -> ReportInfo:
        return await self.reports.post_report(container_id, report, password)
