"""ProMa Database Models"""
from proma.models.user import User
from proma.models.board import Board
from proma.models.board_member import BoardMember
from proma.models.project import Project, ProjectStage
from proma.models.project_member import ProjectMember
from proma.models.category import Category, DEFAULT_CATEGORIES
from proma.models.session import WorkSession

__all__ = [
    "User",
    "Board",
    "BoardMember",
    "Project",
    "ProjectStage",
    "ProjectMember",
    "Category",
    "DEFAULT_CATEGORIES",
    "WorkSession",
]
