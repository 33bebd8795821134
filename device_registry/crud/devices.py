from __future__ import annotations

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from ..models.device import Device
from ..models.user import User


def get_device(db: Session, serial_number: str) -> Device | None:
    """Fetch a device by its serial number (the primary key)."""

    return db.get(Device, serial_number)


def device_exists(db: Session, serial_number: str) -> bool:
    stmt = select(Device.serial_number).where(Device.serial_number == serial_number)
    return db.execute(stmt).first() is not None


def save_device(db: Session, device: Device) -> Device:
    db.add(device)
    db.commit()
    db.refresh(device)
    return device


def delete_device_by_serial(db: Session, serial_number: str) -> None:
    """Delete the device and, through the ORM cascade, its renovations.

    Missing serials are a no-op.
    """

    device = db.get(Device, serial_number)
    if device is None:
        return
    db.delete(device)
    db.commit()


def page_devices(db: Session, page_index: int, size: int) -> tuple[list[Device], int]:
    total = db.execute(select(func.count()).select_from(Device)).scalar_one()
    stmt = (
        select(Device)
        .order_by(Device.serial_number)
        .limit(size)
        .offset(page_index * size)
    )
    return list(db.execute(stmt).scalars().unique().all()), int(total)


def search_devices(db: Session, term: str, page_index: int, size: int) -> tuple[list[Device], int]:
    """Case-insensitive substring search over the serial and the owner's contact fields.

    An empty ``term`` matches every device. Ownerless devices can still match
    on their serial number thanks to the outer join.
    """

    pattern = f"%{term.lower()}%"
    condition = or_(
        func.lower(Device.serial_number).like(pattern),
        func.lower(User.full_name).like(pattern),
        func.lower(User.email).like(pattern),
        func.lower(User.phone).like(pattern),
        func.lower(User.address).like(pattern),
    )
    base = select(Device.serial_number).outerjoin(User, Device.user_id == User.id).where(condition)
    total = db.execute(select(func.count()).select_from(base.subquery())).scalar_one()
    stmt = (
        select(Device)
        .outerjoin(User, Device.user_id == User.id)
        .where(condition)
        .order_by(Device.serial_number)
        .limit(size)
        .offset(page_index * size)
    )
    return list(db.execute(stmt).scalars().unique().all()), int(total)
