"""Container lookup and creation."""

from typing import Optional

from client.codec import decode_container, decode_full_container
from client.error_mapper import ErrorTable
from client.exceptions import InvalidPassword, InvalidToken, NotFound
from client.query import build_url, truncate_password
from client.schemas import ContainerInfo, FullInfo
from client.services.requester import Requester
from common.logging_config import get_logger

logger = get_logger(__name__)

GET_CONTAINER_ERRORS: ErrorTable = {
    403: InvalidPassword,
    404: NotFound,
}

# Missing, expired, limitless (root) or exhausted tokens all surface as InvalidToken.
NEW_CONTAINER_ERRORS: ErrorTable = {
    403: InvalidToken,
    404: InvalidToken,
    507: InvalidToken,
}


class ContainerService:
    def __init__(self, requester: Requester):
        self._requester = requester

    async def get_container(self, container_id: str, password: Optional[str] = None) -> ContainerInfo:
        """
        Fetch a container.

        Args:
            container_id: Container id
            password: Container password, if any

        Returns:
            FullInfo, or EncryptedInfo when the container is encrypted and no
            usable password was given
        """
        url = build_url(
            self._requester.host, 'container', container_id,
            params=[('password', password)],
        )
        response = await self._requester.send('get container', 'GET', url, GET_CONTAINER_ERRORS)
        container = decode_container(response.content)
        logger.debug(f"Fetched container {container.id} as {type(container).__name__}")
        return container

    async def new_container(self, token: str, password: Optional[str] = None) -> FullInfo:
        """
        Create a container under a creation token.

        The service models creation as a GET parameterized by query data only.
        Passwords longer than 1024 bytes are truncated before sending.

        Args:
            token: Creation token id (must have a storage limit)
            password: Optional password; setting one makes the container encrypted

        Returns:
            Full info of the new container
        """
        url = build_url(
            self._requester.host, 'container', trailing_slash=True,
            params=[('token', token), ('password', truncate_password(password))],
        )
        response = await self._requester.send('new container', 'GET', url, NEW_CONTAINER_ERRORS)
        container = decode_full_container(response.content)
        logger.info(f"Created container {container.id} [storage_limit={container.storage_limit}]")
        return container
