"""Passport store and the serial range index.

The two index queries narrow candidates in SQL and then apply the exact,
case-sensitive rules from :mod:`device_registry.core.serials` in Python.
``LIKE`` is case-insensitive on SQLite but not on PostgreSQL; the second pass
makes both backends answer identically.
"""

from __future__ import annotations

from sqlalchemy import Text, delete, func, literal, select
from sqlalchemy.orm import Session

from ..core.serials import (
    LIKE_ESCAPE,
    WILDCARD,
    escape_like,
    is_serial_prefix,
    prefix_matches_pattern,
    ranges_overlap,
)
from ..models.passport import Passport


def _like_pattern(prefix: str) -> str:
    if prefix.endswith(WILDCARD):
        return escape_like(prefix.rstrip(WILDCARD)) + WILDCARD
    return escape_like(prefix)


def _escaped_prefix_column():
    # Stored prefixes are data, not patterns.
    column = Passport.serial_prefix
    for char in (LIKE_ESCAPE, "%", "_"):
        column = func.replace(column, char, LIKE_ESCAPE + char, type_=Text)
    return column


def find_overlapping(db: Session, prefix: str, lo: int, hi: int) -> list[Passport]:
    """Return passports matching ``prefix`` whose window intersects ``[lo, hi]``.

    ``prefix`` may end in ``%`` to match every stored prefix that starts with
    the text before it.
    """

    stmt = (
        select(Passport)
        .where(
            Passport.serial_prefix.like(_like_pattern(prefix), escape=LIKE_ESCAPE),
            Passport.from_serial_number <= hi,
            Passport.to_serial_number >= lo,
        )
        .order_by(Passport.id)
    )
    rows = db.execute(stmt).scalars().all()
    return [
        row
        for row in rows
        if prefix_matches_pattern(prefix, row.serial_prefix)
        and ranges_overlap(row.from_serial_number, row.to_serial_number, lo, hi)
    ]


def find_by_serial_start(db: Session, serial_id: str) -> list[Passport]:
    """Return passports whose ``serial_prefix`` is a literal prefix of ``serial_id``."""

    stmt = (
        select(Passport)
        .where(literal(serial_id).like(_escaped_prefix_column() + WILDCARD, escape=LIKE_ESCAPE))
        .order_by(Passport.id)
    )
    rows = db.execute(stmt).scalars().all()
    return [row for row in rows if is_serial_prefix(row.serial_prefix, serial_id)]


def get_passport(db: Session, passport_id: int) -> Passport | None:
    return db.get(Passport, passport_id)


def save_passport(db: Session, passport: Passport) -> Passport:
    db.add(passport)
    db.commit()
    db.refresh(passport)
    return passport


def delete_passport_by_id(db: Session, passport_id: int) -> None:
    """Delete with a plain DELETE so referencing devices raise instead of being detached."""

    db.execute(delete(Passport).where(Passport.id == passport_id))
    db.commit()


def page_passports(db: Session, page_index: int, size: int) -> tuple[list[Passport], int]:
    """Fetch the 0-based ``page_index`` page and the total row count."""

    total = db.execute(select(func.count()).select_from(Passport)).scalar_one()
    stmt = select(Passport).order_by(Passport.id).limit(size).offset(page_index * size)
    return list(db.execute(stmt).scalars().all()), int(total)
