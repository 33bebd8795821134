from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RenovationCreate(BaseModel):
    device_serial_number: str
    # Stored verbatim: ``None`` and empty strings are both accepted.
    description: Optional[str] = None
    renovation_date: Optional[date] = None


class RenovationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    description: Optional[str] = None
    renovation_date: Optional[date] = None
    device_serial_number: Optional[str] = None
