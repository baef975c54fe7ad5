"""Board endpoints"""
from typing import Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from proma.authz import Actor, is_pm, logged_in, on_board
from proma.authz.membership import get_board, get_user
from proma.database import get_db
from proma.dependencies import get_logged_in_actor, require
from proma.errors import BadRequestError, NotFoundError
from proma.models import Board, BoardMember, Project, User
from proma.schemas import (
    BoardCreate,
    BoardResponse,
    BoardUpdate,
    MemberChange,
    ProjectCreate,
    ProjectResponse,
    UserResponse,
)

router = APIRouter()


def _add_board_member(db: Session, board_id: int, user_id: int) -> User:
    get_board(db, board_id)
    user = get_user(db, user_id)

    db.add(BoardMember(board_id=board_id, user_id=user_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError("user already on board")
    return user


@router.get(
    "",
    response_model=Dict[str, List[BoardResponse]],
    dependencies=[Depends(require(logged_in))],
)
def list_boards(
    actor: Actor = Depends(get_logged_in_actor),
    db: Session = Depends(get_db),
):
    """Return every board the current user belongs to."""
    get_user(db, actor.id)
    boards = (
        db.query(Board)
        .join(BoardMember, BoardMember.board_id == Board.id)
        .filter(BoardMember.user_id == actor.id)
        .order_by(Board.title)
        .all()
    )
    return {"boards": [BoardResponse.model_validate(board) for board in boards]}


@router.post(
    "",
    response_model=Dict[str, BoardResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(is_pm))],
)
def create_board(
    board_data: BoardCreate,
    actor: Actor = Depends(get_logged_in_actor),
    db: Session = Depends(get_db),
):
    """Create a board and add the creating PM to it."""
    board = Board(title=board_data.title)
    db.add(board)
    db.flush()
    _add_board_member(db, board.id, actor.id)
    db.refresh(board)
    return {"board": BoardResponse.model_validate(board)}


@router.get(
    "/{board_id}",
    response_model=Dict[str, BoardResponse],
    dependencies=[Depends(require(logged_in, on_board))],
)
def get_board_detail(board_id: int, db: Session = Depends(get_db)):
    return {"board": BoardResponse.model_validate(get_board(db, board_id))}


@router.patch(
    "/{board_id}",
    response_model=Dict[str, BoardResponse],
    dependencies=[Depends(require(is_pm, on_board))],
)
def update_board(board_id: int, board_data: BoardUpdate, db: Session = Depends(get_db)):
    board = get_board(db, board_id)
    board.title = board_data.title
    db.commit()
    db.refresh(board)
    return {"board": BoardResponse.model_validate(board)}


@router.get(
    "/{board_id}/users",
    response_model=Dict[str, List[UserResponse]],
    dependencies=[Depends(require(logged_in, on_board))],
)
def list_board_users(board_id: int, db: Session = Depends(get_db)):
    get_board(db, board_id)
    users = (
        db.query(User)
        .join(BoardMember, BoardMember.user_id == User.id)
        .filter(BoardMember.board_id == board_id)
        .order_by(User.last_name, User.first_name)
        .all()
    )
    return {"boardUsers": [UserResponse.model_validate(user) for user in users]}


@router.post(
    "/{board_id}/users",
    response_model=Dict[str, UserResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(is_pm, on_board))],
)
def add_board_user(board_id: int, member: MemberChange, db: Session = Depends(get_db)):
    user = _add_board_member(db, board_id, member.user_id)
    return {"newBoardUser": UserResponse.model_validate(user)}


@router.delete(
    "/{board_id}/users",
    response_model=Dict[str, int],
    dependencies=[Depends(require(is_pm, on_board))],
)
def remove_board_user(board_id: int, member: MemberChange, db: Session = Depends(get_db)):
    membership = db.get(BoardMember, {"board_id": board_id, "user_id": member.user_id})
    if membership is None:
        raise NotFoundError("no board-user found")
    db.delete(membership)
    db.commit()
    return {"removed": member.user_id}


@router.get(
    "/{board_id}/projects",
    response_model=Dict[str, List[ProjectResponse]],
    dependencies=[Depends(require(logged_in, on_board))],
)
def list_board_projects(board_id: int, db: Session = Depends(get_db)):
    get_board(db, board_id)
    projects = (
        db.query(Project).filter(Project.board_id == board_id).order_by(Project.stage, Project.id).all()
    )
    return {"boardProjects": [ProjectResponse.model_validate(project) for project in projects]}


@router.post(
    "/{board_id}/projects",
    response_model=Dict[str, ProjectResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(is_pm, on_board))],
)
def create_board_project(board_id: int, project_data: ProjectCreate, db: Session = Depends(get_db)):
    get_board(db, board_id)
    project = Project(name=project_data.name, priority=project_data.priority, board_id=board_id)
    db.add(project)
    db.commit()
    db.refresh(project)
    return {"project": ProjectResponse.model_validate(project)}
