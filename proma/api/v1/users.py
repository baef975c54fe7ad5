"""User endpoints"""
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query
from pydantic import ValidationError
from sqlalchemy.orm import Session

from proma.authz import Actor, correct_user_or_shared_board_pm, logged_in, on_shared_board
from proma.authz.membership import get_user, shared_users
from proma.database import get_db
from proma.dependencies import get_logged_in_actor, require
from proma.errors import BadRequestError, NotFoundError
from proma.models import User
from proma.schemas import UserPromote, UserResponse, UserUpdate
from proma.security import hash_password
from proma.utils.sql import apply_partial_update, sql_for_partial_update

router = APIRouter()

USER_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
}


def _validation_details(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )


@router.get(
    "",
    response_model=Dict[str, List[UserResponse]],
    dependencies=[Depends(require(logged_in))],
)
def list_users(
    actor: Actor = Depends(get_logged_in_actor),
    db: Session = Depends(get_db),
):
    """Return every user sharing a board with the current user, the user included."""
    users = shared_users(db, actor.id)
    return {"users": [UserResponse.model_validate(user) for user in users]}


@router.get(
    "/search",
    response_model=Dict[str, UserResponse],
    dependencies=[Depends(require(logged_in))],
)
def search_user(email: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    """Look a user up by email, e.g. before adding them to a board or project."""
    user = db.query(User).filter(User.email == email.strip()).first()
    if user is None:
        raise NotFoundError("no user found")
    return {"user": UserResponse.model_validate(user)}


@router.get(
    "/{user_id}",
    response_model=Dict[str, UserResponse],
    dependencies=[Depends(require(logged_in, on_shared_board))],
)
def get_user_detail(user_id: int, db: Session = Depends(get_db)):
    return {"user": UserResponse.model_validate(get_user(db, user_id))}


@router.patch(
    "/{user_id}",
    response_model=Dict[str, UserResponse],
    dependencies=[Depends(require(logged_in, correct_user_or_shared_board_pm))],
)
def update_user(
    user_id: int,
    payload: Dict[str, Any] = Body(...),
    actor: Actor = Depends(get_logged_in_actor),
    db: Session = Depends(get_db),
):
    """Users edit their own account; a PM sharing a board may only promote to PM."""
    if actor.id == user_id:
        try:
            changes = UserUpdate.model_validate(payload)
        except ValidationError as exc:
            raise BadRequestError(_validation_details(exc))

        data = changes.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
        if "password" in data:
            data["password"] = hash_password(data["password"])
        if "email" in data:
            taken = db.query(User.id).filter(User.email == data["email"], User.id != user_id).first()
            if taken is not None:
                raise BadRequestError("duplicate email")

        update = sql_for_partial_update(data, USER_COLUMNS)
        user = apply_partial_update(db, User, user_id, update)
        return {"user": UserResponse.model_validate(user)}

    try:
        UserPromote.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError(_validation_details(exc))

    user = get_user(db, user_id)
    if user.is_pm:
        raise BadRequestError("user already PM")
    update = sql_for_partial_update({"isPm": True}, {"isPm": "is_pm"})
    user = apply_partial_update(db, User, user_id, update)
    return {"user": UserResponse.model_validate(user)}
