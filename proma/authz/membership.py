"""Membership facts derived from the board/project/session graph.

Every function takes the store handle as its first argument and is read-only.
A referenced entity that does not exist raises ``NotFoundError``; ``False``
always means "exists, but is not a member".
"""
from typing import List, Set

from sqlalchemy.orm import Session, aliased

from proma.errors import NotFoundError
from proma.models import Board, BoardMember, Project, ProjectMember, User, WorkSession


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("no user found")
    return user


def get_board(db: Session, board_id: int) -> Board:
    board = db.get(Board, board_id)
    if board is None:
        raise NotFoundError("no board found")
    return board


def get_project(db: Session, project_id: int) -> Project:
    project = db.get(Project, project_id)
    if project is None:
        raise NotFoundError("no project found")
    return project


def get_session(db: Session, session_id: int) -> WorkSession:
    session = db.get(WorkSession, session_id)
    if session is None:
        raise NotFoundError("no session found")
    return session


def _exists(query) -> bool:
    return query.first() is not None


def is_user_on_board(db: Session, user_id: int, board_id: int) -> bool:
    get_board(db, board_id)
    return _exists(
        db.query(BoardMember.user_id).filter(
            BoardMember.user_id == user_id,
            BoardMember.board_id == board_id,
        )
    )


def is_user_on_project(db: Session, user_id: int, project_id: int) -> bool:
    """Explicit project assignment only; board membership does not imply it."""
    get_project(db, project_id)
    return _exists(
        db.query(ProjectMember.user_id).filter(
            ProjectMember.user_id == user_id,
            ProjectMember.project_id == project_id,
        )
    )


def board_id_of_project(db: Session, project_id: int) -> int:
    return get_project(db, project_id).board_id


def project_id_of_session(db: Session, session_id: int) -> int:
    return get_session(db, session_id).project_id


def board_id_of_session(db: Session, session_id: int) -> int:
    return board_id_of_project(db, project_id_of_session(db, session_id))


def shared_users(db: Session, user_id: int) -> List[User]:
    """Users that share at least one board with ``user_id``, the user included."""
    user = get_user(db, user_id)

    theirs = aliased(BoardMember)
    mine = aliased(BoardMember)
    users = (
        db.query(User)
        .join(theirs, theirs.user_id == User.id)
        .join(mine, mine.board_id == theirs.board_id)
        .filter(mine.user_id == user_id)
        .distinct()
        .order_by(User.id)
        .all()
    )
    if user not in users:
        users.insert(0, user)
    return users


def shared_user_ids(db: Session, user_id: int) -> Set[int]:
    return {user.id for user in shared_users(db, user_id)}
