"""Pydantic schemas for device registration and updates."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DeviceCreate(BaseModel):
    serial_number: str = Field(min_length=1)
    purchase_date: date
    user_id: Optional[int] = None


class DeviceUpdate(BaseModel):
    serial_number: str
    purchase_date: date
    # ``None`` clears the stored comment.
    comment: Optional[str] = None


class DeviceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    serial_number: str
    purchase_date: Optional[date] = None
    warranty_expiration_date: Optional[date] = None
    comment: Optional[str] = None
    user_id: Optional[int] = None
    passport_id: Optional[int] = None
    owner_name: Optional[str] = None
