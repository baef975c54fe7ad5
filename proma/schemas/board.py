"""Schemas for boards and board membership"""
from pydantic import Field

from proma.schemas.base import CamelModel


class BoardCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=35)


class BoardUpdate(CamelModel):
    title: str = Field(..., min_length=1, max_length=35)


class BoardResponse(CamelModel):
    id: int
    title: str


class MemberChange(CamelModel):
    """Body of the add/remove member routes of boards and projects."""

    user_id: int
