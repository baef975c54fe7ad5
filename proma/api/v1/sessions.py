"""Work session endpoints"""
from typing import Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from proma.authz import Actor, logged_in, on_session_board, session_owner_or_pm_on_board
from proma.authz.membership import get_session, get_user
from proma.database import get_db
from proma.dependencies import get_logged_in_actor, require
from proma.errors import BadRequestError, NotFoundError
from proma.models import BoardMember, Category, Project, WorkSession
from proma.schemas import SessionResponse, SessionUpdate
from proma.schemas.session import as_utc
from proma.utils.sql import apply_partial_update, sql_for_partial_update

router = APIRouter()

SESSION_COLUMNS = {
    "startDatetime": "start_datetime",
    "endDatetime": "end_datetime",
    "categoryId": "category_id",
}

REQUIRED_FIELDS = ("startDatetime", "categoryId")


@router.get(
    "",
    response_model=Dict[str, List[SessionResponse]],
    dependencies=[Depends(require(logged_in))],
)
def list_sessions(
    actor: Actor = Depends(get_logged_in_actor),
    db: Session = Depends(get_db),
):
    """PMs see every session on their boards; members see the sessions they recorded."""
    get_user(db, actor.id)
    query = db.query(WorkSession)
    if actor.is_pm:
        query = (
            query.join(Project, Project.id == WorkSession.project_id)
            .join(BoardMember, BoardMember.board_id == Project.board_id)
            .filter(BoardMember.user_id == actor.id)
        )
    else:
        query = query.filter(WorkSession.user_id == actor.id)
    sessions = query.order_by(WorkSession.id).all()
    return {"sessions": [SessionResponse.model_validate(session) for session in sessions]}


@router.get(
    "/{session_id}",
    response_model=Dict[str, SessionResponse],
    dependencies=[Depends(require(logged_in, on_session_board))],
)
def get_session_detail(session_id: int, db: Session = Depends(get_db)):
    return {"session": SessionResponse.model_validate(get_session(db, session_id))}


@router.patch(
    "/{session_id}",
    response_model=Dict[str, SessionResponse],
    dependencies=[Depends(require(logged_in, session_owner_or_pm_on_board))],
)
def update_session(session_id: int, session_data: SessionUpdate, db: Session = Depends(get_db)):
    """Partially update times, category or comment of a session."""
    data = session_data.model_dump(exclude_unset=True, by_alias=True)
    for name in REQUIRED_FIELDS:
        if name in data and data[name] is None:
            raise BadRequestError(f"{name} cannot be null")

    session = get_session(db, session_id)
    start = as_utc(data.get("startDatetime", session.start_datetime))
    end = as_utc(data.get("endDatetime", session.end_datetime))
    if end is not None and end < start:
        raise BadRequestError("endDatetime must not be before startDatetime")

    if "categoryId" in data and db.get(Category, data["categoryId"]) is None:
        raise NotFoundError("no category found")

    update = sql_for_partial_update(data, SESSION_COLUMNS)
    session = apply_partial_update(db, WorkSession, session_id, update)
    return {"session": SessionResponse.model_validate(session)}


@router.delete(
    "/{session_id}",
    response_model=Dict[str, int],
    dependencies=[Depends(require(logged_in, session_owner_or_pm_on_board))],
)
def delete_session(session_id: int, db: Session = Depends(get_db)):
    session = get_session(db, session_id)
    db.delete(session)
    db.commit()
    return {"deleted": session_id}
