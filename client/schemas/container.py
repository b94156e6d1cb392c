"""Pydantic schemas for containers and the files they hold."""

from datetime import datetime
from typing import Optional, Set, Tuple, Union

from pydantic import BaseModel, ConfigDict

from common.constants import MAX_FILES_PER_CONTAINER, MIN_BILLED_FILE_BYTES


class FileInfo(BaseModel):
    """Metadata of a single file inside a container."""
    model_config = ConfigDict(frozen=True)

    id: str
    path: str
    created: datetime
    modified: datetime
    size: int
    mime: str

    @property
    def billed_size(self) -> int:
        """Bytes counted against the container's storage limit."""
        return max(self.size, MIN_BILLED_FILE_BYTES)


class FullInfo(BaseModel):
    """Container as seen by a caller holding the right password (or none needed)."""
    model_config = ConfigDict(frozen=True)

    id: str
    created: datetime
    modified: datetime
    encrypted: bool
    storage_limit: int
    files: Tuple[FileInfo, ...] = ()

    @property
    def used_storage(self) -> int:
        return sum(f.billed_size for f in self.files)

    @property
    def remaining_storage(self) -> int:
        return max(self.storage_limit - self.used_storage, 0)

    @property
    def file_slots_left(self) -> int:
        """Files that can still be added before the per-container file limit."""
        return max(MAX_FILES_PER_CONTAINER - len(self.files), 0)

    def find_file(self, path: str) -> Optional[FileInfo]:
        for f in self.files:
            if f.path == path:
                return f
        return None

    def directories(self) -> Set[str]:
        """
        Implicit directories derived from file paths.

        For "a/b/c.txt" this yields "a" and "a/b". Leading slashes are ignored.
        """
        dirs = set()
        for f in self.files:
            parts = [p for p in f.path.split('/') if p]
            for i in range(1, len(parts)):
                dirs.add('/'.join(parts[:i]))
        return dirs


class EncryptedInfo(BaseModel):
    """Container seen without (or with a wrong) password: only the id is revealed."""
    model_config = ConfigDict(frozen=True)

    id: str


ContainerInfo = Union[FullInfo, EncryptedInfo]
