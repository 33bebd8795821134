"""SQLAlchemy model for warranty passports.

WHAT: A passport is the warranty template for a contiguous serial window.
WHEN: Created by administrators before devices in the window get registered.
WHY: Devices resolve their warranty length from the passport that owns them.
HOW: ``serial_prefix`` plus the inclusive ``from``/``to`` window identify the
     serials it covers. Non-overlap per prefix is checked by the service layer;
     the unique constraint only catches identical concurrent inserts.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, Index, Integer, Text, UniqueConstraint

from ..db.session import Base


class Passport(Base):
    __tablename__ = "passports"
    __table_args__ = (
        UniqueConstraint("serial_prefix", "from_serial_number", name="uq_passports_prefix_from"),
        Index("ix_passports_prefix_window", "serial_prefix", "from_serial_number", "to_serial_number"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    model = Column(Text, nullable=False)
    serial_prefix = Column(Text, nullable=False)
    from_serial_number = Column(BigInteger, nullable=False)
    to_serial_number = Column(BigInteger, nullable=False)
    warranty_months = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return (
            f"<Passport id={self.id} {self.serial_prefix}"
            f"[{self.from_serial_number},{self.to_serial_number}]>"
        )


__all__ = ["Passport"]
