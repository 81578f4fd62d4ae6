from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite

from smartres_api.extensions import db
from smartres_api.models.counter import IdCounter

EMPLOYEE = "EMP"
EQUIPMENT = "EQ"
PROJECT = "PROJ"
BUSINESS_CENTER = "BC"
RESOURCE_GROUP = "RG"
RESOURCE_MASTER = "RES"
ASSIGNMENT = "ASG"

# dialects with INSERT .. ON CONFLICT .. RETURNING
_UPSERT = {"postgresql": postgresql.insert, "sqlite": sqlite.insert}


def format_business_id(prefix: str, n: int, width: int = 3) -> str:
    return f"{prefix}{n:0{width}d}"


def next_business_id(prefix: str) -> str:
    """
    Issue the next business key for `prefix` (EMP001, EMP002, ...).

    The counter row is created or incremented by one upsert statement inside
    the caller's transaction, so two concurrent creates can never receive the
    same number, including the very first one for a prefix.
    Numbers are never reused, soft-deleted rows keep theirs.
    """
    insert = _UPSERT.get(db.engine.dialect.name)
    if insert is not None:
        stmt = (
            insert(IdCounter)
            .values(prefix=prefix, value=1)
            .on_conflict_do_update(
                index_elements=[IdCounter.prefix],
                set_={"value": IdCounter.value + 1},
            )
            .returning(IdCounter.value)
        )
        n = db.session.execute(stmt).scalar_one()
        return format_business_id(prefix, n)

    res = db.session.execute(
        update(IdCounter)
        .where(IdCounter.prefix == prefix)
        .values(value=IdCounter.value + 1)
    )
    if res.rowcount:
        n = db.session.execute(
            select(IdCounter.value).where(IdCounter.prefix == prefix)
        ).scalar_one()
    else:
        n = 1
        db.session.add(IdCounter(prefix=prefix, value=n))
        db.session.flush()
    return format_business_id(prefix, n)
