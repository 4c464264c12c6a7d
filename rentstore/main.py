"""Record Store Startup — logging, database and store initialized once per process.

Invariants:
    - startup() configures logging before anything else logs
    - The store is process-wide; there is no teardown beyond process exit

Usage:
    python -m rentstore.main    # create tables and report readiness
"""

import logging

from rentstore.config import Settings, get_settings
from rentstore.infrastructure.observability import setup_logging
from rentstore.services.store import RentalStore, init_store

logger = logging.getLogger(__name__)


def startup(settings: Settings | None = None) -> RentalStore:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = init_store(settings)
    logger.info(
        "Record store ready" if store.db.health_check() else "Record store database unreachable",
    )
    return store


if __name__ == "__main__":
    startup()
