"""Translate transport outcomes into the storage error taxonomy.

Each operation declares its own status table; the same status code can mean
different things on different endpoints. Anything a table does not name falls
through to TransportError.
"""

import json
from typing import Mapping, Type

from client.exceptions import (
    InvalidPassword,
    InvalidToken,
    NotFound,
    StorageLimitReached,
    StorageServiceError,
    TokenExhausted,
    TransportError,
)
from client.transport import TransportResponse
from common.logging_config import get_logger

logger = get_logger(__name__)

ErrorTable = Mapping[int, Type[StorageServiceError]]

ERROR_MESSAGES = {
    InvalidPassword: 'Invalid or missing password',
    InvalidToken: 'Token is missing, expired, exhausted or has no storage limit',
    NotFound: 'Not found',
    StorageLimitReached: 'Storage limit reached',
    TokenExhausted: 'Parent token cannot mint the requested token',
}

MAX_DETAIL_LENGTH = 200


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _detail(content: bytes) -> str:
    """
    Extract a short human-readable detail from an error body.

    Args:
        content: Raw response body

    Returns:
        The 'detail' or 'message' JSON field if present, else the truncated text
    """
    if not content:
        return ''
    try:
        data = json.loads(content)
    except ValueError:
        text = content.decode('utf-8', errors='replace')
    else:
        if isinstance(data, dict) and (data.get('detail') or data.get('message')):
            text = str(data.get('detail') or data.get('message'))
        else:
            text = content.decode('utf-8', errors='replace')
    text = text.strip()
    if len(text) > MAX_DETAIL_LENGTH:
        text = text[:MAX_DETAIL_LENGTH] + '...'
    return text


def map_error(operation: str, response: TransportResponse, table: ErrorTable) -> StorageServiceError:
    """
    Build the error for a non-2xx response.

    Args:
        operation: Operation name used in the message (e.g. 'get container')
        response: The failed response
        table: The operation's status -> error class table

    Returns:
        Exactly one StorageServiceError instance
    """
    status = response.status_code
    detail = _detail(response.content)
    error_cls = table.get(status)

    if error_cls is None:
        message = f"{operation}: unexpected status {status}"
        if detail:
            message = f"{message}: {detail}"
        logger.error(f"Unmapped status for {operation}: status={status}")
        return TransportError(message, status_code=status)

    message = f"{operation}: {ERROR_MESSAGES[error_cls]}"
    if detail:
        message = f"{message}: {detail}"
    logger.warning(f"{operation} failed with {error_cls.__name__} status={status}")
    return error_cls(message, status_code=status)


def raise_for_status(operation: str, response: TransportResponse, table: ErrorTable) -> None:
    """Raise the mapped error unless the response is a 2xx."""
    if not is_success(response.status_code):
        raise map_error(operation, response, table)
