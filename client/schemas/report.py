"""Pydantic schemas for moderation reports."""

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Report(BaseModel):
    """User-submitted reason plus the implicated file paths."""
    model_config = ConfigDict(frozen=True)

    reason: str
    files: Tuple[str, ...] = ()


class ReportInfo(BaseModel):
    """A stored report awaiting resolution."""
    model_config = ConfigDict(frozen=True)

    id: str
    container_id: str
    created: datetime
    report: Report
