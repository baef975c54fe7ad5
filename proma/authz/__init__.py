"""Access control: membership facts, predicates and the request gate."""
from proma.authz.actor import Actor, Member, ProjectManager, actor_from_claims
from proma.authz.gate import authorize
from proma.authz.predicates import (
    Predicate,
    RequestContext,
    correct_user_or_pm,
    correct_user_or_shared_board_pm,
    is_pm,
    logged_in,
    on_board,
    on_board_of_project,
    on_project_or_pm_on_board,
    on_session_board,
    on_shared_board,
    session_owner_or_pm_on_board,
)

__all__ = [
    "Actor",
    "Member",
    "ProjectManager",
    "actor_from_claims",
    "authorize",
    "Predicate",
    "RequestContext",
    "correct_user_or_pm",
    "correct_user_or_shared_board_pm",
    "is_pm",
    "logged_in",
    "on_board",
    "on_board_of_project",
    "on_project_or_pm_on_board",
    "on_session_board",
    "on_shared_board",
    "session_owner_or_pm_on_board",
]
