"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class UseTokenCommand:
    """Save a creation token in the config."""

    token: str
    command: Literal["use-token"] = "use-token"


@dataclass(frozen=True)
class GetContainerCommand:
    """Show a container."""

    container_id: str
    password: Optional[str] = None
    command: Literal["container"] = "container"


@dataclass(frozen=True)
class NewContainerCommand:
    """Create a container under a creation token."""

    token: Optional[str] = None
    password: Optional[str] = None
    command: Literal["new-container"] = "new-container"


@dataclass(frozen=True)
class GetFileCommand:
    """Download a file."""

    container_id: str
    path: str
    output_path: Optional[str] = None
    password: Optional[str] = None
    command: Literal["get"] = "get"


@dataclass(frozen=True)
class PutFileCommand:
    """Upload a local file."""

    container_id: str
    path: str
    local_path: str
    password: Optional[str] = None
    command: Literal["put"] = "put"


@dataclass(frozen=True)
class DeleteFileCommand:
    """Delete a file."""

    container_id: str
    path: str
    password: Optional[str] = None
    command: Literal["rm"] = "rm"


@dataclass(frozen=True)
class GetTokenCommand:
    """Show a token."""

    token_id: str
    command: Literal["token"] = "token"


@dataclass(frozen=True)
class NewTokenCommand:
    """Mint a child token."""

    parent: str
    token_limit: int
    storage_limit: int
    hint: Optional[str] = None
    command: Literal["new-token"] = "new-token"


@dataclass(frozen=True)
class ListReportsCommand:
    """List open reports, optionally filtered."""

    container_id: Optional[str] = None
    path: Optional[str] = None
    command: Literal["reports"] = "reports"


@dataclass(frozen=True)
class ReportCommand:
    """Report files in a container."""

    container_id: str
    reason: str
    files: tuple[str, ...] = ()
    password: Optional[str] = None
    command: Literal["report"] = "report"


CommandRequest = (
    UseTokenCommand
    | GetContainerCommand
    | NewContainerCommand
    | GetFileCommand
    | PutFileCommand
    | DeleteFileCommand
    | GetTokenCommand
    | NewTokenCommand
    | ListReportsCommand
    | ReportCommand
)
