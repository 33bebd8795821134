"""Passport lifecycle: overlap-gated create/update, serial resolution, paging."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import AlreadyExistsError, NotFoundError, OperationFailedError
from ..core.serials import is_serial_prefix, range_contains, split_serial
from ..crud import passports as passport_store
from ..models.passport import Passport
from ..schemas.page import Page
from ..schemas.passport import PassportCreate, PassportOut, PassportUpdate
from .mappers import apply_passport_update, passport_from_create
from .paging import build_page, clamp_size, to_page_index

logger = logging.getLogger("device_registry.passports")

SERIAL_EXISTS_MESSAGE = "Serial number already exists"
PASSPORT_NOT_FOUND_MESSAGE = "Passport not found"
DELETE_FAILED_MESSAGE = "Can't delete passport"


def _persist(db: Session, passport: Passport) -> Passport:
    try:
        return passport_store.save_passport(db, passport)
    except IntegrityError:
        db.rollback()
        logger.warning(
            "passport.save_conflict",
            extra={"extra_data": {"serial_prefix": passport.serial_prefix}},
            exc_info=True,
        )
        raise AlreadyExistsError(SERIAL_EXISTS_MESSAGE) from None


def create_passport(db: Session, req: PassportCreate) -> Passport:
    candidate = passport_from_create(req)
    overlapping = passport_store.find_overlapping(
        db, candidate.serial_prefix, candidate.from_serial_number, candidate.to_serial_number
    )
    if overlapping:
        raise AlreadyExistsError(SERIAL_EXISTS_MESSAGE)
    passport = _persist(db, candidate)
    logger.info(
        "passport.created",
        extra={"extra_data": {"passport_id": passport.id, "serial_prefix": passport.serial_prefix}},
    )
    return passport


def update_passport(db: Session, passport_id: int, req: PassportUpdate) -> Passport:
    passport = passport_store.get_passport(db, passport_id)
    if passport is None:
        raise NotFoundError(PASSPORT_NOT_FOUND_MESSAGE)
    overlapping = passport_store.find_overlapping(
        db, req.serial_prefix, req.from_serial_number, req.to_serial_number
    )
    if any(other.id != passport.id for other in overlapping):
        raise AlreadyExistsError(SERIAL_EXISTS_MESSAGE)
    apply_passport_update(passport, req)
    passport = _persist(db, passport)
    logger.info("passport.updated", extra={"extra_data": {"passport_id": passport.id}})
    return passport


def find_passport_by_id(db: Session, passport_id: int) -> Passport | None:
    return passport_store.get_passport(db, passport_id)


def find_passport_by_serial_id(db: Session, serial_id: str) -> Passport:
    """Resolve the passport governing a concrete serial number.

    The serial's trailing digit run is its position; the first candidate (by
    id) whose prefix starts the serial and whose window contains that
    position wins.
    """

    number = split_serial(serial_id).number
    if number is not None:
        for candidate in passport_store.find_by_serial_start(db, serial_id):
            if not is_serial_prefix(candidate.serial_prefix, serial_id):
                continue
            if range_contains(candidate.from_serial_number, candidate.to_serial_number, number):
                return candidate
    raise NotFoundError(f"Passport not found for serial number: {serial_id}")


def list_passports_by_serial_prefix(db: Session, serial_id: str) -> list[Passport]:
    return passport_store.find_by_serial_start(db, serial_id)


def list_passports(db: Session, page: int, size: int | None = None) -> Page:
    size = clamp_size(size)
    rows, total = passport_store.page_passports(db, to_page_index(page), size)
    return build_page(rows, total, page=page, size=size, schema=PassportOut)


def delete_passport(db: Session, passport_id: int) -> None:
    try:
        passport_store.delete_passport_by_id(db, passport_id)
    except SQLAlchemyError:
        db.rollback()
        logger.warning(
            "passport.delete_failed",
            extra={"extra_data": {"passport_id": passport_id}},
            exc_info=True,
        )
        raise OperationFailedError(DELETE_FAILED_MESSAGE) from None
    logger.info("passport.deleted", extra={"extra_data": {"passport_id": passport_id}})
