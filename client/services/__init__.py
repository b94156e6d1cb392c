"""Domain operations grouped by resource."""

from client.services.requester import Requester
from client.services.container_service import ContainerService
from client.services.file_service import FileService
from client.services.report_service import ReportService
from client.services.token_service import TokenService

__all__ = [
    "Requester",
    "ContainerService",
    "FileService",
    "ReportService",
    "TokenService",
]
