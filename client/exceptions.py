"""Error taxonomy for storage service operations."""

from typing import Optional


class StorageServiceError(Exception):
    """
    Base exception class for every failure an operation can produce.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status={self.status_code})"
        return self.message


class InvalidPassword(StorageServiceError):
    """
    Raised when a container password is missing or wrong.
    """
    pass


class InvalidToken(StorageServiceError):
    """
    Raised when a creation token is missing, expired, has no storage limit or is exhausted.
    """
    pass


class NotFound(StorageServiceError):
    """
    Raised when the addressed container, file or token does not exist.
    """
    pass


class StorageLimitReached(StorageServiceError):
    """
    Raised when a write would exceed the container's storage or file limits.
    """
    pass


class TokenExhausted(StorageServiceError):
    """
    Raised when a parent token cannot mint the requested child token.
    """
    pass


class TransportError(StorageServiceError):
    """
    Catch-all for connection failures, unmapped statuses and undecodable bodies.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        self.cause = cause
        super().__init__(message, status_code=status_code)
