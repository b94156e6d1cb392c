"""Moderation reports."""

from typing import List, Optional

from client.codec import decode_report_info, decode_report_infos, encode_report
from client.error_mapper import ErrorTable
from client.exceptions import InvalidPassword, NotFound, TokenExhausted
from client.query import build_url
from client.schemas import Report, ReportInfo
from client.services.requester import Requester
from common.logging_config import get_logger

logger = get_logger(__name__)

# 507 on a read-only listing is kept as the service reports it.
GET_REPORTS_ERRORS: ErrorTable = {
    507: TokenExhausted,
}

POST_REPORT_ERRORS: ErrorTable = {
    403: InvalidPassword,
    404: NotFound,
}


class ReportService:
    def __init__(self, requester: Requester):
        self._requester = requester

    async def get_reports(
        self,
        container_id: Optional[str] = None,
        path: Optional[str] = None,
    ) -> List[ReportInfo]:
        """
        List open reports.

        Args:
            container_id: Only reports against this container
            path: Only reports implicating this file path

        Returns:
            Open reports; unfiltered when both filters are None
        """
        url = build_url(
            self._requester.host, 'report', trailing_slash=True,
            params=[('container_id', container_id), ('path', path)],
        )
        response = await self._requester.send('get reports', 'GET', url, GET_REPORTS_ERRORS)
        return decode_report_infos(response.content)

    async def post_report(
        self,
        container_id: str,
        report: Report,
        password: Optional[str] = None,
    ) -> ReportInfo:
        url = build_url(
            self._requester.host, 'report', trailing_slash=True,
            params=[('container', container_id), ('password', password)],
        )
        response = await self._requester.send(
            'post report', 'POST', url, POST_REPORT_ERRORS,
            content=encode_report(report),
            headers={'Content-Type': 'application/json'},
        )
        info = decode_report_info(response.content)
        logger.info(f"Filed report {info.id} against container {container_id}")
        return info
