"""File reads, writes and deletes inside a container."""

from typing import Any, Callable, Optional, TypeVar

from client.codec import decode_bytes, decode_json, decode_text
from client.error_mapper import ErrorTable
from client.exceptions import InvalidPassword, NotFound, StorageLimitReached
from client.query import build_url
from client.services.requester import Requester
from common.constants import MAX_PATH_BYTES
from common.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

GET_FILE_ERRORS: ErrorTable = {
    403: InvalidPassword,
    404: NotFound,
}

PUT_FILE_ERRORS: ErrorTable = {
    403: InvalidPassword,
    404: NotFound,
    507: StorageLimitReached,
}

DELETE_FILE_ERRORS: ErrorTable = {
    403: InvalidPassword,
    404: NotFound,
}


class FileService:
    def __init__(self, requester: Requester):
        self._requester = requester

    def _file_url(self, container_id: str, path: str, password: Optional[str]) -> str:
        return build_url(
            self._requester.host, 'file', container_id,
            params=[('path', path), ('password', password)],
        )

    async def get_file(
        self,
        container_id: str,
        path: str,
        password: Optional[str] = None,
        decoder: Callable[[bytes], T] = decode_bytes,
    ) -> T:
        """
        Download a file and decode its body.

        Args:
            container_id: Container id
            path: Virtual file path
            password: Container password, if any
            decoder: Body decoder (decode_bytes, decode_json, decode_text or custom)

        Returns:
            The decoded body
        """
        url = self._file_url(container_id, path, password)
        response = await self._requester.send('get file', 'GET', url, GET_FILE_ERRORS)
        return decoder(response.content)

    async def get_file_json(self, container_id: str, path: str, password: Optional[str] = None) -> Any:
        return await self.get_file(container_id, path, password, decoder=decode_json)

    async def get_file_text(self, container_id: str, path: str, password: Optional[str] = None) -> str:
        return await self.get_file(container_id, path, password, decoder=decode_text)

    async def put_file(
        self,
        container_id: str,
        path: str,
        content: bytes,
        password: Optional[str] = None,
    ) -> None:
        """
        Create or overwrite a file.

        Paths over 1024 UTF-8 bytes are rejected with StorageLimitReached
        without contacting the service, matching what the service answers.

        Args:
            container_id: Container id
            path: Virtual file path; parent directories are implicit
            content: Raw file content
            password: Container password, if any
        """
        if len(path.encode('utf-8')) > MAX_PATH_BYTES:
            logger.warning(f"Rejected put file: path exceeds {MAX_PATH_BYTES} bytes")
            raise StorageLimitReached(f"put file: path exceeds {MAX_PATH_BYTES} bytes")

        url = self._file_url(container_id, path, password)
        await self._requester.send(
            'put file', 'PUT', url, PUT_FILE_ERRORS,
            content=content,
            headers={'Content-Type': 'application/octet-stream'},
        )
        logger.info(f"Stored {len(content)} bytes in container {container_id}")

    async def delete_file(self, container_id: str, path: str, password: Optional[str] = None) -> None:
        url = self._file_url(container_id, path, password)
        await self._requester.send('delete file', 'DELETE', url, DELETE_FILE_ERRORS)
        logger.info(f"Deleted file from container {container_id}")
