# farmlog/services/db_init.py
from __future__ import annotations

import logging

from farmlog.config import settings
# Register all models (side-effect import)
import farmlog.models.entities  # noqa: F401
import farmlog.models.user  # noqa: F401
from farmlog.services.auth import seed_admin_if_missing
from farmlog.services.demo_data import seed_demo_data
from farmlog.services.store import RecordStore

logger = logging.getLogger(__name__)


def init_db(store: RecordStore, seed_demo: bool = False) -> None:
    """
    Creates the tables, the admin account and (optionally) the demo records.
    Called once at startup before the app serves requests.
    """
    store.create_schema()
    seed_admin_if_missing(store, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    if seed_demo:
        seed_demo_data(store)


def bootstrap_store() -> RecordStore:
    """Opens DATABASE_URL; falls back to an in-memory database with demo data if that fails."""
    try:
        store = RecordStore.from_url(settings.DATABASE_URL)
        init_db(store, seed_demo=settings.SEED_DEMO_DATA)
        logger.info("using database %s", store.engine.url.render_as_string(hide_password=True))
        return store
    except Exception:
        logger.exception("configured database unavailable, falling back to in-memory storage")

    store = RecordStore.from_url(settings.FALLBACK_DATABASE_URL)
    init_db(store, seed_demo=True)
    return store
