"""
Pydantic schemas for request/response validation
"""
from proma.schemas.user import (
    AuthResponse,
    UserLogin,
    UserPromote,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from proma.schemas.board import BoardCreate, BoardResponse, BoardUpdate, MemberChange
from proma.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from proma.schemas.session import SessionCreate, SessionResponse, SessionUpdate
from proma.schemas.category import CategoryResponse

__all__ = [
    "AuthResponse",
    "UserLogin",
    "UserPromote",
    "UserRegister",
    "UserResponse",
    "UserUpdate",
    "BoardCreate",
    "BoardResponse",
    "BoardUpdate",
    "MemberChange",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "SessionCreate",
    "SessionResponse",
    "SessionUpdate",
    "CategoryResponse",
]
