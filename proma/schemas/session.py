"""Schemas for work sessions"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import field_validator

from proma.schemas.base import CamelModel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize to an aware UTC datetime; naive values are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SessionCreate(CamelModel):
    category_id: int
    user_id: Optional[int] = None
    comment: Optional[str] = None

    class Config:
        extra = "forbid"


class SessionUpdate(CamelModel):
    """Editable session fields. Author and project are fixed at creation."""

    start_datetime: Optional[datetime] = None
    end_datetime: Optional[datetime] = None
    category_id: Optional[int] = None
    comment: Optional[str] = None

    class Config:
        extra = "forbid"

    @field_validator("start_datetime", "end_datetime")
    @classmethod
    def _normalize_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SessionResponse(CamelModel):
    id: int
    project_id: int
    user_id: int
    start_datetime: datetime
    end_datetime: Optional[datetime]
    category_id: int
    comment: Optional[str]
