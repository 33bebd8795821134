"""Tests for the error envelope, JSON logging and settings."""

import json
import logging
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

from device_registry.core.config import AppSettings
from device_registry.core.errors import (
    AlreadyExistsError,
    ErrorCode,
    InvalidSerialNumberError,
    RegistryError,
)
from device_registry.core.logging import JsonLogFormatter, correlation_id_ctx_var


def test_error_kinds_and_envelope():
    err = AlreadyExistsError("Device already registered")
    assert isinstance(err, RegistryError)
    assert err.code is ErrorCode.ALREADY_EXISTS
    assert err.to_envelope() == {"code": "already_exists", "message": "Device already registered"}
    assert InvalidSerialNumberError("x").to_envelope({"serial": "BAD"})["details"] == {"serial": "BAD"}
    assert RegistryError("boom", ErrorCode.NOT_FOUND).code is ErrorCode.NOT_FOUND


def test_json_formatter_includes_extra_and_correlation_id():
    record = logging.LogRecord("device_registry.devices", logging.INFO, __file__, 1, "device.registered", None, None)
    record.extra_data = {"serial_number": "SN-1", "owned": True}
    token = correlation_id_ctx_var.set("req-123")
    try:
        payload = json.loads(JsonLogFormatter().format(record))
    finally:
        correlation_id_ctx_var.reset(token)

    assert payload["level"] == "INFO"
    assert payload["logger"] == "device_registry.devices"
    assert payload["event"] == "device.registered"
    assert payload["app"] == "DeviceRegistry"
    assert payload["serial_number"] == "SN-1"
    assert payload["correlation_id"] == "req-123"
    assert "error_code" not in payload


def test_json_formatter_tags_registry_error_code():
    try:
        raise InvalidSerialNumberError("Invalid serial number")
    except InvalidSerialNumberError:
        exc_info = sys.exc_info()
    record = logging.LogRecord(
        "device_registry.devices", logging.WARNING, __file__, 1, "device.passport_unresolved", None, exc_info
    )
    payload = json.loads(JsonLogFormatter(app_name="registry-test").format(record))

    assert payload["app"] == "registry-test"
    assert payload["error_code"] == "invalid_serial_number"
    assert "InvalidSerialNumberError" in payload["exception"]


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///custom.db")
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
    settings = AppSettings(DATA_DIR=tmp_path)
    assert settings.database_url == "sqlite:///custom.db"
    assert settings.DEFAULT_PAGE_SIZE == 25

    monkeypatch.delenv("DATABASE_URL")
    fallback = AppSettings(DATA_DIR=tmp_path)
    assert fallback.database_url == f"sqlite:///{tmp_path / 'registry.db'}"


@pytest.mark.parametrize("size, expected", [(None, 10), (5, 5), (10_000, 200)])
def test_page_size_clamping(size, expected):
    from device_registry.services.paging import clamp_size

    assert clamp_size(size) == expected


def test_init_db_creates_registry_tables():
    from sqlalchemy import inspect
    from sqlalchemy.pool import StaticPool

    from device_registry.db.session import create_db_engine, init_db

    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    assert {"passports", "devices", "renovations", "users"} <= set(inspect(engine).get_table_names())


def test_configure_logging_installs_json_handler():
    from device_registry.core.logging import configure_logging

    previous_handlers, previous_level = logging.root.handlers, logging.root.level
    try:
        configure_logging("debug", as_json=True)
        assert isinstance(logging.root.handlers[0].formatter, JsonLogFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.handlers = previous_handlers
        logging.root.setLevel(previous_level)
