"""Helpers for selective (partial) UPDATE statements."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import bindparam, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from proma.errors import BadRequestError, NotFoundError

ModelT = TypeVar("ModelT")

_PLACEHOLDER = re.compile(r"\$(\d+)")


@dataclass(frozen=True)
class PartialUpdate:
    columns: List[str]
    fragments: List[str]
    values: List[Any]

    @property
    def set_clause(self) -> str:
        return ", ".join(self.fragments)


def sql_for_partial_update(
    data: Mapping[str, Any],
    column_map: Optional[Mapping[str, str]] = None,
) -> PartialUpdate:
    """Build the SET clause of an UPDATE from the fields that actually change.

    ``data`` maps attribute names to new values; ``column_map`` maps attribute
    names to column names and falls back to the attribute name itself.
    Placeholders are numbered from ``$1`` in ``data``'s iteration order and
    ``values`` lists the bound values in the same order::

        >>> update = sql_for_partial_update(
        ...     {"shape": "square", "isCool": "false"}, {"isCool": "is_cool"}
        ... )
        >>> update.set_clause
        '"shape"=$1, "is_cool"=$2'
        >>> update.values
        ['square', 'false']

    Raises ``BadRequestError`` when ``data`` is empty.
    """

    if not data:
        raise BadRequestError("no data")

    column_map = column_map or {}
    columns = [column_map.get(name, name) for name in data]
    fragments = [f'"{column}"=${idx}' for idx, column in enumerate(columns, start=1)]
    return PartialUpdate(columns=columns, fragments=fragments, values=list(data.values()))


def apply_partial_update(db: Session, model: Type[ModelT], row_id: int, update: PartialUpdate) -> ModelT:
    """Execute ``update`` against the row of ``model`` with primary key ``row_id``.

    The positional ``$n`` placeholders are bound as typed SQLAlchemy parameters,
    using each target column's type so dates and enums are stored the same way
    the ORM stores them. Raises ``NotFoundError`` when no row matched.
    """

    table = model.__table__
    id_placeholder = len(update.values) + 1
    sql = f"UPDATE {table.name} SET {update.set_clause} WHERE id=${id_placeholder}"

    params = [
        bindparam(f"p{idx}", value, type_=table.c[column].type)
        for idx, (column, value) in enumerate(zip(update.columns, update.values), start=1)
    ]
    params.append(bindparam(f"p{id_placeholder}", row_id, type_=table.c.id.type))

    stmt = text(_PLACEHOLDER.sub(r":p\1", sql)).bindparams(*params)
    try:
        result = db.execute(stmt)
    except IntegrityError as exc:
        db.rollback()
        raise BadRequestError(f"update violates a constraint of {table.name}") from exc
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"no {table.name.rstrip('s')} found")
    db.commit()

    return db.get(model, row_id, populate_existing=True)
