"""Error taxonomy shared by the registry services.

Every failure a caller can observe is a :class:`RegistryError` carrying one of
the :class:`ErrorCode` kinds below. Storage-level causes that get collapsed into
a generic kind are logged where the collapse happens and are not chained onto
the raised error.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    NOT_REGISTERED = "not_registered"
    INVALID_SERIAL_NUMBER = "invalid_serial_number"
    OPERATION_FAILED = "operation_failed"


class RegistryError(Exception):
    code: ErrorCode = ErrorCode.OPERATION_FAILED

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_envelope(self, details: Any | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if details is not None:
            payload["details"] = details
        return payload


class AlreadyExistsError(RegistryError):
    code = ErrorCode.ALREADY_EXISTS


class NotFoundError(RegistryError):
    code = ErrorCode.NOT_FOUND


class NotRegisteredError(RegistryError):
    code = ErrorCode.NOT_REGISTERED


class InvalidSerialNumberError(RegistryError):
    code = ErrorCode.INVALID_SERIAL_NUMBER


class OperationFailedError(RegistryError):
    code = ErrorCode.OPERATION_FAILED


__all__ = [
    "ErrorCode",
    "RegistryError",
    "AlreadyExistsError",
    "NotFoundError",
    "NotRegisteredError",
    "InvalidSerialNumberError",
    "OperationFailedError",
]
