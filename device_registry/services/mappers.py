"""Pure request-to-model conversions. None of these touch a session."""

from __future__ import annotations

from ..models.device import Device, Renovation
from ..models.passport import Passport
from ..schemas.passport import PassportCreate, PassportUpdate
from ..schemas.renovation import RenovationCreate


def passport_from_create(req: PassportCreate) -> Passport:
    return Passport(
        name=req.name,
        model=req.model,
        serial_prefix=req.serial_prefix,
        from_serial_number=req.from_serial_number,
        to_serial_number=req.to_serial_number,
        warranty_months=req.warranty_months,
    )


def apply_passport_update(passport: Passport, req: PassportUpdate) -> Passport:
    """Copy every field of ``req`` onto ``passport`` in place and return it."""

    passport.name = req.name
    passport.model = req.model
    passport.serial_prefix = req.serial_prefix
    passport.from_serial_number = req.from_serial_number
    passport.to_serial_number = req.to_serial_number
    passport.warranty_months = req.warranty_months
    return passport


def renovation_from_create(req: RenovationCreate, device: Device) -> Renovation:
    return Renovation(
        description=req.description,
        renovation_date=req.renovation_date,
        device=device,
    )
