"""Bootstrap entry point: configure logging and create missing tables.

Run ``python -m device_registry.main`` once against a fresh database.
"""

from __future__ import annotations

import logging

from .core.config import settings
from .core.logging import configure_logging
from .db.session import engine, init_db

logger = logging.getLogger("device_registry.bootstrap")


def bootstrap() -> None:
    configure_logging()
    init_db(engine)
    logger.info(
        "registry.ready",
        extra={"extra_data": {"app": settings.APP_NAME, "database": engine.url.render_as_string(hide_password=True)}},
    )


if __name__ == "__main__":
    bootstrap()
