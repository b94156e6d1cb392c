"""Pydantic schemas for service responses and request bodies."""

from client.schemas.container import (
    ContainerInfo,
    EncryptedInfo,
    FileInfo,
    FullInfo,
)
from client.schemas.report import Report, ReportInfo
from client.schemas.token import Token

__all__ = [
    "ContainerInfo",
    "EncryptedInfo",
    "FileInfo",
    "FullInfo",
    "Report",
    "ReportInfo",
    "Token",
]
