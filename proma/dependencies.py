"""FastAPI dependencies for the acting user and route authorization."""
from typing import Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from proma.authz import Actor, Predicate, RequestContext, authorize
from proma.database import get_db
from proma.errors import BadRequestError, UnauthorizedError
from proma.security import decode_access_token

ID_PARAMS = ("board_id", "project_id", "session_id", "user_id")

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Actor]:
    """Return the verified actor, or ``None`` for a missing or invalid token."""
    if credentials is None:
        return None
    return decode_access_token(credentials.credentials.strip())


def get_logged_in_actor(actor: Optional[Actor] = Depends(get_current_actor)) -> Actor:
    """Actor for handlers whose chain starts with ``logged_in``."""
    if actor is None:
        raise UnauthorizedError()
    return actor


def _id_params(request: Request) -> Dict[str, int]:
    params = {}
    for name in ID_PARAMS:
        raw = request.path_params.get(name)
        if raw is None:
            continue
        try:
            params[name] = int(raw)
        except (TypeError, ValueError):
            raise BadRequestError(f"{name} must be an integer")
    return params


def require(*chain: Predicate):
    """Build a dependency that runs ``chain`` before the route handler.

    Usage::

        @router.get("/{board_id}", dependencies=[Depends(require(logged_in, on_board))])
    """

    def _gate(
        request: Request,
        actor: Optional[Actor] = Depends(get_current_actor),
        db: Session = Depends(get_db),
    ) -> None:
        ctx = RequestContext(db=db, actor=actor, params=_id_params(request))
        authorize(ctx, chain)

    _gate.__name__ = "require_" + "_".join(predicate.__name__ for predicate in chain)
    return _gate
