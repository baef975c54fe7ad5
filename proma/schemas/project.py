"""Schemas for projects"""
from typing import Optional

from pydantic import Field

from proma.models.project import ProjectStage
from proma.schemas.base import CamelModel


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=35)
    priority: int = Field(..., ge=1, le=5)


class ProjectUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=35)
    priority: Optional[int] = Field(None, ge=1, le=5)
    stage: Optional[ProjectStage] = None

    class Config:
        extra = "forbid"


class ProjectResponse(CamelModel):
    id: int
    name: str
    priority: int
    stage: ProjectStage
    board_id: int
