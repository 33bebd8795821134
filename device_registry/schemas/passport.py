"""Pydantic schemas that describe passport payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Largest value a signed 64-bit INTEGER column holds.
MAX_SERIAL_NUMBER = 2**63 - 1
# Bounds purchase_date + months to the range of datetime.date.
MAX_WARRANTY_MONTHS = 1200


class PassportBase(BaseModel):
    name: str
    model: str
    serial_prefix: str
    warranty_months: int = Field(ge=0, le=MAX_WARRANTY_MONTHS)
    from_serial_number: int = Field(ge=0, le=MAX_SERIAL_NUMBER)
    to_serial_number: int = Field(ge=0, le=MAX_SERIAL_NUMBER)

    @model_validator(mode="after")
    def check_window(self):
        if self.from_serial_number > self.to_serial_number:
            raise ValueError("from_serial_number must not exceed to_serial_number")
        return self


class PassportCreate(PassportBase):
    pass


class PassportUpdate(PassportBase):
    pass


class PassportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    model: str
    serial_prefix: str
    warranty_months: int
    from_serial_number: int
    to_serial_number: int
