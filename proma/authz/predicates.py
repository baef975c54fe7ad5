"""Authorization predicates.

Each predicate looks at one request and answers allow (``True``) or deny
(``False``). They are matched by hand to where a route sits in the
Board -> Project -> Session graph, and any PM escalation is conjoined with
membership of the board that owns the target.

An absent actor is a deny, decided before touching the store. Lookups of the
target entity raise ``NotFoundError``, which is never turned into a deny.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from sqlalchemy.orm import Session

from proma.authz import membership
from proma.authz.actor import Actor


@dataclass(frozen=True)
class RequestContext:
    """Immutable per-request view handed to every predicate in a chain."""

    db: Session
    actor: Optional[Actor]
    params: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def param(self, name: str) -> int:
        return self.params[name]


Predicate = Callable[[RequestContext], bool]


def logged_in(ctx: RequestContext) -> bool:
    return ctx.actor is not None


def is_pm(ctx: RequestContext) -> bool:
    return ctx.actor is not None and ctx.actor.is_pm


def correct_user_or_pm(ctx: RequestContext) -> bool:
    actor = ctx.actor
    if actor is None:
        return False
    return actor.is_pm or actor.id == ctx.param("user_id")


def on_board(ctx: RequestContext) -> bool:
    if ctx.actor is None:
        return False
    return membership.is_user_on_board(ctx.db, ctx.actor.id, ctx.param("board_id"))


def on_board_of_project(ctx: RequestContext) -> bool:
    if ctx.actor is None:
        return False
    board_id = membership.board_id_of_project(ctx.db, ctx.param("project_id"))
    return membership.is_user_on_board(ctx.db, ctx.actor.id, board_id)


def on_session_board(ctx: RequestContext) -> bool:
    if ctx.actor is None:
        return False
    board_id = membership.board_id_of_session(ctx.db, ctx.param("session_id"))
    return membership.is_user_on_board(ctx.db, ctx.actor.id, board_id)


def session_owner_or_pm_on_board(ctx: RequestContext) -> bool:
    actor = ctx.actor
    if actor is None:
        return False

    session = membership.get_session(ctx.db, ctx.param("session_id"))
    if session.user_id == actor.id:
        return True
    if not actor.is_pm:
        return False
    board_id = membership.board_id_of_project(ctx.db, session.project_id)
    return membership.is_user_on_board(ctx.db, actor.id, board_id)


def on_project_or_pm_on_board(ctx: RequestContext) -> bool:
    actor = ctx.actor
    if actor is None:
        return False

    project_id = ctx.param("project_id")
    if membership.is_user_on_project(ctx.db, actor.id, project_id):
        return True
    if not actor.is_pm:
        return False
    board_id = membership.board_id_of_project(ctx.db, project_id)
    return membership.is_user_on_board(ctx.db, actor.id, board_id)


def correct_user_or_shared_board_pm(ctx: RequestContext) -> bool:
    actor = ctx.actor
    if actor is None:
        return False

    user_id = ctx.param("user_id")
    # Load the target first so a missing user is a 404 for everyone.
    shared = membership.shared_user_ids(ctx.db, user_id)
    if actor.id == user_id:
        return True
    return actor.is_pm and actor.id in shared


def on_shared_board(ctx: RequestContext) -> bool:
    if ctx.actor is None:
        return False
    # Shared boards are symmetric; resolving from the target keeps a missing user a 404.
    return ctx.actor.id in membership.shared_user_ids(ctx.db, ctx.param("user_id"))
