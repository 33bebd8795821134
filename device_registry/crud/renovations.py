"""Renovation store helpers."""

from __future__ import annotations

from sqlalchemy.orm import Session

from ..models.device import Renovation


def save_renovation(db: Session, renovation: Renovation) -> Renovation:
    db.add(renovation)
    db.commit()
    db.refresh(renovation)
    return renovation


def get_renovation(db: Session, renovation_id: int) -> Renovation | None:
    return db.get(Renovation, renovation_id)


def delete_renovation(db: Session, renovation: Renovation) -> None:
    db.delete(renovation)
    db.commit()
