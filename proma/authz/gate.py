"""Ordered evaluation of a route's predicate chain."""
import logging
from typing import Sequence

from proma.authz.predicates import Predicate, RequestContext
from proma.errors import UnauthorizedError

logger = logging.getLogger(__name__)


def authorize(ctx: RequestContext, chain: Sequence[Predicate]) -> None:
    """Run ``chain`` in order and raise on the first denial.

    Exactly one ``UnauthorizedError`` is raised for a denied chain and the
    remaining predicates are not evaluated. Errors raised by a predicate
    (``NotFoundError`` for a missing entity) propagate unchanged.
    """
    for predicate in chain:
        if not predicate(ctx):
            logger.info(
                "Denied by %s (actor=%s, params=%s)",
                predicate.__name__,
                ctx.actor.id if ctx.actor else None,
                dict(ctx.params),
            )
            raise UnauthorizedError()
