from __future__ import annotations

from enum import Enum

from sqlalchemy import Column, Integer, Text

from ..db.session import Base


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    """Device owner. Only identity and contact fields matter to the registry."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True, index=True)
    phone = Column(Text, nullable=False, unique=True, index=True)
    address = Column(Text, nullable=True)
    role = Column(Text, nullable=False, default=UserRole.USER.value)
    password = Column(Text, nullable=True)


__all__ = ["User", "UserRole"]
