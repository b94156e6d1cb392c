"""Pydantic schema for creation tokens."""

from datetime import datetime
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict


class Token(BaseModel):
    """
    A node of the quota-subdivision tree.

    Only the root token has no parent and no limits. Children never receive
    limits larger than their parent's at creation time.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    parent: Optional[str] = None
    child_tokens: FrozenSet[str] = frozenset()
    child_containers: FrozenSet[str] = frozenset()
    storage_limit: Optional[int] = None
    token_limit: Optional[int] = None
    expired: bool = False
    created: datetime
    used: Optional[datetime] = None
    hint: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def can_create_container(self) -> bool:
        """True if the service should accept this token for a new container."""
        if self.expired or self.storage_limit is None:
            return False
        return self.token_limit is None or self.token_limit > 0

    def permits_child(self, token_limit: int, storage_limit: int) -> bool:
        """
        Check whether this token may mint a child with the given limits.

        Advisory only: the service decides, and concurrent siblings may
        consume quota in between.

        Args:
            token_limit: Requested token quota of the child
            storage_limit: Requested storage limit of the child in bytes

        Returns:
            False if the service would answer TokenExhausted
        """
        if self.expired:
            return False
        if self.token_limit is not None:
            if self.token_limit <= 0 or token_limit > self.token_limit:
                return False
        if self.storage_limit is not None and storage_limit > self.storage_limit:
            return False
        return True
