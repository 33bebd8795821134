"""Renovation recorder: repair history attached to registered devices."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ..core.errors import NotFoundError
from ..crud import renovations as renovation_store
from ..models.device import Renovation
from ..schemas.renovation import RenovationCreate
from . import devices as device_service
from .mappers import renovation_from_create

logger = logging.getLogger("device_registry.renovations")


def save_renovation(db: Session, req: RenovationCreate) -> Renovation:
    """Record a renovation for an existing device.

    ``NotRegisteredError`` from the existence check and any storage error
    propagate unchanged.
    """

    device = device_service.is_device_exists(db, req.device_serial_number)
    renovation = renovation_store.save_renovation(db, renovation_from_create(req, device))
    logger.info(
        "renovation.recorded",
        extra={"extra_data": {"renovation_id": renovation.id, "serial_number": device.serial_number}},
    )
    return renovation


def list_device_renovations(db: Session, serial_number: str) -> list[Renovation]:
    device = device_service.is_device_exists(db, serial_number)
    return list(device.renovations)


def delete_renovation(db: Session, renovation_id: int) -> None:
    renovation = renovation_store.get_renovation(db, renovation_id)
    if renovation is None:
        raise NotFoundError("Renovation not found")
    renovation_store.delete_renovation(db, renovation)
    logger.info("renovation.deleted", extra={"extra_data": {"renovation_id": renovation_id}})
