"""Project endpoints"""
from typing import Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from proma.authz import (
    Actor,
    is_pm,
    logged_in,
    on_board_of_project,
    on_project_or_pm_on_board,
)
from proma.authz.membership import (
    board_id_of_project,
    get_project,
    get_user,
    is_user_on_board,
    is_user_on_project,
)
from proma.database import get_db
from proma.dependencies import get_logged_in_actor, require
from proma.errors import BadRequestError, NotFoundError, UnauthorizedError
from proma.models import BoardMember, Category, Project, ProjectMember, User, WorkSession
from proma.schemas import (
    MemberChange,
    ProjectResponse,
    ProjectUpdate,
    SessionCreate,
    SessionResponse,
    UserResponse,
)
from proma.utils.sql import apply_partial_update, sql_for_partial_update

router = APIRouter()


@router.get(
    "",
    response_model=Dict[str, List[ProjectResponse]],
    dependencies=[Depends(require(logged_in))],
)
def list_projects(
    actor: Actor = Depends(get_logged_in_actor),
    db: Session = Depends(get_db),
):
    """PMs see every project on their boards; members see the projects assigned to them."""
    get_user(db, actor.id)
    if actor.is_pm:
        query = (
            db.query(Project)
            .join(BoardMember, BoardMember.board_id == Project.board_id)
            .filter(BoardMember.user_id == actor.id)
        )
    else:
        query = (
            db.query(Project)
            .join(ProjectMember, ProjectMember.project_id == Project.id)
            .filter(ProjectMember.user_id == actor.id)
        )
    projects = query.order_by(Project.stage, Project.id).all()
    return {"projects": [ProjectResponse.model_validate(project) for project in projects]}


@router.get(
    "/{project_id}",
    response_model=Dict[str, ProjectResponse],
    dependencies=[Depends(require(logged_in, on_board_of_project))],
)
def get_project_detail(project_id: int, db: Session = Depends(get_db)):
    return {"project": ProjectResponse.model_validate(get_project(db, project_id))}


@router.patch(
    "/{project_id}",
    response_model=Dict[str, ProjectResponse],
    dependencies=[Depends(require(is_pm, on_board_of_project))],
)
def update_project(project_id: int, project_data: ProjectUpdate, db: Session = Depends(get_db)):
    """Partially update name, priority or stage."""
    data = project_data.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
    update = sql_for_partial_update(data, {})
    project = apply_partial_update(db, Project, project_id, update)
    return {"project": ProjectResponse.model_validate(project)}


@router.get(
    "/{project_id}/users",
    response_model=Dict[str, List[UserResponse]],
    dependencies=[Depends(require(logged_in, on_board_of_project))],
)
def list_project_users(project_id: int, db: Session = Depends(get_db)):
    get_project(db, project_id)
    users = (
        db.query(User)
        .join(ProjectMember, ProjectMember.user_id == User.id)
        .filter(ProjectMember.project_id == project_id)
        .order_by(User.last_name, User.first_name)
        .all()
    )
    return {"users": [UserResponse.model_validate(user) for user in users]}


@router.post(
    "/{project_id}/users",
    response_model=Dict[str, UserResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(is_pm, on_board_of_project))],
)
def add_project_user(project_id: int, member: MemberChange, db: Session = Depends(get_db)):
    get_project(db, project_id)
    user = get_user(db, member.user_id)

    db.add(ProjectMember(project_id=project_id, user_id=user.id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError("user already on project")
    return {"user": UserResponse.model_validate(user)}


@router.delete(
    "/{project_id}/users",
    response_model=Dict[str, int],
    dependencies=[Depends(require(is_pm, on_board_of_project))],
)
def remove_project_user(project_id: int, member: MemberChange, db: Session = Depends(get_db)):
    get_project(db, project_id)
    get_user(db, member.user_id)

    membership = db.get(ProjectMember, {"project_id": project_id, "user_id": member.user_id})
    if membership is None:
        raise NotFoundError("no project-user found")
    db.delete(membership)
    db.commit()
    return {"removed": member.user_id}


@router.get(
    "/{project_id}/sessions",
    response_model=Dict[str, List[SessionResponse]],
    dependencies=[Depends(require(logged_in, on_board_of_project))],
)
def list_project_sessions(project_id: int, db: Session = Depends(get_db)):
    get_project(db, project_id)
    sessions = (
        db.query(WorkSession).filter(WorkSession.project_id == project_id).order_by(WorkSession.id).all()
    )
    return {"sessions": [SessionResponse.model_validate(session) for session in sessions]}


@router.post(
    "/{project_id}/sessions",
    response_model=Dict[str, SessionResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(logged_in, on_project_or_pm_on_board))],
)
def create_project_session(
    project_id: int,
    session_data: SessionCreate,
    actor: Actor = Depends(get_logged_in_actor),
    db: Session = Depends(get_db),
):
    """Start a session on the project. The author defaults to the current user.

    Only a PM on the project's board may record a session for someone else,
    and that author must be on the project or its board.
    """
    user_id = session_data.user_id if session_data.user_id is not None else actor.id
    board_id = board_id_of_project(db, project_id)
    if user_id != actor.id:
        if not (actor.is_pm and is_user_on_board(db, actor.id, board_id)):
            raise UnauthorizedError()
        get_user(db, user_id)
        if not (is_user_on_project(db, user_id, project_id) or is_user_on_board(db, user_id, board_id)):
            raise BadRequestError("user not on project or its board")
    else:
        get_user(db, user_id)
    if db.get(Category, session_data.category_id) is None:
        raise NotFoundError("no category found")

    session = WorkSession(
        project_id=project_id,
        user_id=user_id,
        category_id=session_data.category_id,
        comment=session_data.comment,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return {"session": SessionResponse.model_validate(session)}
