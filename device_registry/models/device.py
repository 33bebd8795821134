"""SQLAlchemy models for registered devices and their renovation history."""

from __future__ import annotations

from sqlalchemy import Column, Date, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from ..db.session import Base


class Device(Base):
    """A physical unit identified by its serial number.

    The device owns its renovations: deleting the device deletes them and
    removing one from ``renovations`` deletes that row.
    """

    __tablename__ = "devices"

    serial_number = Column(Text, primary_key=True)
    purchase_date = Column(Date, nullable=True)
    warranty_expiration_date = Column(Date, nullable=True)
    comment = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    passport_id = Column(Integer, ForeignKey("passports.id"), nullable=True, index=True)

    user = relationship("User", lazy="joined")
    passport = relationship("Passport", lazy="joined")
    renovations = relationship(
        "Renovation",
        back_populates="device",
        cascade="all, delete-orphan",
        order_by="Renovation.id",
    )

    @property
    def owner_name(self) -> str | None:
        return self.user.full_name if self.user else None


class Renovation(Base):
    __tablename__ = "renovations"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(Text, nullable=True)
    renovation_date = Column(Date, nullable=True)
    device_serial_number = Column(
        Text,
        ForeignKey("devices.serial_number"),
        nullable=True,
        index=True,
    )

    device = relationship("Device", back_populates="renovations")


__all__ = ["Device", "Renovation"]
