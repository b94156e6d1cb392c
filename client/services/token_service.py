"""Token lookup and delegation."""

from typing import Optional

from client.codec import decode_token
from client.error_mapper import ErrorTable
from client.exceptions import NotFound, TokenExhausted
from client.query import build_url
from client.schemas import Token
from client.services.requester import Requester
from common.logging_config import get_logger

logger = get_logger(__name__)

GET_TOKEN_ERRORS: ErrorTable = {
    404: NotFound,
}

NEW_TOKEN_ERRORS: ErrorTable = {
    404: NotFound,
    507: TokenExhausted,
}


class TokenService:
    def __init__(self, requester: Requester):
        self._requester = requester

    async def get_token(self, token_id: str) -> Token:
        url = build_url(self._requester.host, 'token', token_id)
        response = await self._requester.send('get token', 'GET', url, GET_TOKEN_ERRORS)
        return decode_token(response.content)

    async def new_token(
        self,
        parent: str,
        token_limit: int,
        storage_limit: int,
        hint: Optional[str] = None,
    ) -> Token:
        """
        Mint a child token under `parent`.

        The service answers TokenExhausted when the parent is expired, has no
        token quota left, or the requested limits exceed its own.

        Args:
            parent: Parent token id
            token_limit: Number of tokens/containers the child may mint
            storage_limit: Storage limit of the child in bytes
            hint: Free-text annotation for operators

        Returns:
            The new token
        """
        url = build_url(
            self._requester.host, 'token', parent, 'new',
            params=[
                ('token_limit', token_limit),
                ('storage_limit', storage_limit),
                ('hint', hint),
            ],
        )
        response = await self._requester.send('new token', 'GET', url, NEW_TOKEN_ERRORS)
        token = decode_token(response.content)
        logger.info(f"Minted child token [token_limit={token.token_limit} storage_limit={token.storage_limit}]")
        return token
