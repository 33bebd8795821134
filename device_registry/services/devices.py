"""Device registration, warranty recomputation and lookup.

Devices move through ``Unregistered -> Registered -> Updated* -> Deleted``.
Registration resolves the governing passport from the serial number and stores
the derived warranty expiration; updates recompute it from the new purchase
date. Every passport-lookup failure during registration is reported as
``InvalidSerialNumberError`` and the original cause is only logged.
"""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import (
    AlreadyExistsError,
    InvalidSerialNumberError,
    NotFoundError,
    NotRegisteredError,
    OperationFailedError,
)
from ..crud import devices as device_store
from ..crud import users as user_store
from ..models.device import Device
from ..models.passport import Passport
from ..models.user import User
from ..schemas.device import DeviceCreate, DeviceOut, DeviceUpdate
from ..schemas.page import Page
from . import passports as passport_service
from .paging import build_page, clamp_size, to_page_index
from .warranty import compute_warranty_expiration

logger = logging.getLogger("device_registry.devices")

ALREADY_REGISTERED_MESSAGE = "Device already registered"
INVALID_SERIAL_MESSAGE = "Invalid serial number"
NOT_REGISTERED_MESSAGE = "Device not registered"
DEVICE_NOT_FOUND_MESSAGE = "Device not found"
USER_NOT_FOUND_MESSAGE = "User not found"
# Kept verbatim for callers that already match on it.
DELETE_FAILED_MESSAGE = "Renovations exits"


def _resolve_passport(db: Session, serial_number: str) -> Passport:
    try:
        return passport_service.find_passport_by_serial_id(db, serial_number)
    except Exception as exc:
        logger.warning(
            "device.passport_unresolved",
            extra={"extra_data": {"serial_number": serial_number, "cause": str(exc)}},
        )
        raise InvalidSerialNumberError(INVALID_SERIAL_MESSAGE) from None


def register_device(db: Session, serial_number: str, purchase_date: date, owner: User | None) -> Device:
    passport = _resolve_passport(db, serial_number)
    device = Device(
        serial_number=serial_number,
        purchase_date=purchase_date,
        warranty_expiration_date=compute_warranty_expiration(
            purchase_date, passport.warranty_months, owner
        ),
        passport=passport,
        user=owner,
    )
    try:
        device = device_store.save_device(db, device)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same serial.
        db.rollback()
        logger.warning(
            "device.register_conflict",
            extra={"extra_data": {"serial_number": serial_number}},
            exc_info=True,
        )
        raise AlreadyExistsError(ALREADY_REGISTERED_MESSAGE) from None
    logger.info(
        "device.registered",
        extra={
            "extra_data": {
                "serial_number": serial_number,
                "passport_id": passport.id,
                "owned": owner is not None,
            }
        },
    )
    return device


def already_exist(db: Session, serial_number: str) -> None:
    if device_store.get_device(db, serial_number) is not None:
        raise AlreadyExistsError(ALREADY_REGISTERED_MESSAGE)


def register_new_device(db: Session, req: DeviceCreate) -> Device:
    already_exist(db, req.serial_number)
    owner = user_store.get_user(db, req.user_id) if req.user_id is not None else None
    if owner is None:
        raise NotFoundError(USER_NOT_FOUND_MESSAGE)
    return register_device(db, req.serial_number, req.purchase_date, owner)


def add_anonymous_device(db: Session, req: DeviceCreate) -> Device:
    already_exist(db, req.serial_number)
    return register_device(db, req.serial_number, req.purchase_date, None)


def find_device(db: Session, serial_number: str) -> Device | None:
    return device_store.get_device(db, serial_number)


def is_device_exists(db: Session, serial_number: str) -> Device:
    if not device_store.device_exists(db, serial_number):
        raise NotRegisteredError(NOT_REGISTERED_MESSAGE)
    return device_store.get_device(db, serial_number)


def update_device(db: Session, req: DeviceUpdate) -> Device:
    device = device_store.get_device(db, req.serial_number)
    if device is None:
        raise NotFoundError(DEVICE_NOT_FOUND_MESSAGE)
    passport = device.passport
    if passport is None:
        # Rows registered before passports were linked.
        passport = _resolve_passport(db, device.serial_number)
        device.passport = passport
    device.comment = req.comment
    device.purchase_date = req.purchase_date
    device.warranty_expiration_date = compute_warranty_expiration(
        req.purchase_date, passport.warranty_months, device.user
    )
    device = device_store.save_device(db, device)
    logger.info("device.updated", extra={"extra_data": {"serial_number": device.serial_number}})
    return device


def delete_device(db: Session, serial_number: str) -> None:
    try:
        device_store.delete_device_by_serial(db, serial_number)
    except SQLAlchemyError:
        db.rollback()
        logger.warning(
            "device.delete_failed",
            extra={"extra_data": {"serial_number": serial_number}},
            exc_info=True,
        )
        raise OperationFailedError(DELETE_FAILED_MESSAGE) from None
    logger.info("device.deleted", extra={"extra_data": {"serial_number": serial_number}})


def get_devices(db: Session, search_term: str | None, page: int, size: int | None = None) -> Page:
    size = clamp_size(size)
    page_index = to_page_index(page)
    if search_term is None:
        rows, total = device_store.page_devices(db, page_index, size)
    else:
        rows, total = device_store.search_devices(db, search_term, page_index, size)
    return build_page(rows, total, page=page, size=size, schema=DeviceOut)
