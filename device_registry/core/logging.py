from __future__ import annotations

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Mapping

from .config import settings
from .errors import RegistryError

# Set by whichever outer layer drives a unit of work (web request, job, CLI).
correlation_id_ctx_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record, tagged with the registry app name.

    ``extra_data`` mappings are merged at the top level. When the record
    carries a :class:`RegistryError`, its ``code`` is emitted as ``error_code``
    so collapsed failures can be filtered by kind.
    """

    def __init__(self, app_name: str | None = None) -> None:
        super().__init__()
        self.app_name = app_name or settings.APP_NAME

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "app": self.app_name,
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        correlation_id = correlation_id_ctx_var.get()
        if correlation_id:
            payload["correlation_id"] = correlation_id
        extra = getattr(record, "extra_data", None)
        if isinstance(extra, Mapping):
            payload.update(extra)
        if record.exc_info:
            exc = record.exc_info[1]
            if isinstance(exc, RegistryError):
                payload["error_code"] = exc.code.value
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"), default=str)


def configure_logging(level: str | None = None, *, as_json: bool | None = None) -> None:
    handler = logging.StreamHandler()
    use_json = settings.LOG_JSON if as_json is None else as_json
    if use_json:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logging.root.handlers = [handler]
    logging.root.setLevel((level or settings.LOG_LEVEL).upper())
