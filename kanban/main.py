from __future__ import annotations

import logging

from kanban.config import SETTINGS
from kanban.infra.db import init_db
from kanban.infra.logging import setup_logging
from kanban.infra.storage import KeyValueStorage, SqlKeyValueStorage
from kanban.services.board import BoardSession
from kanban.services.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_session(storage: KeyValueStorage | None = None, configure_logging: bool = True) -> BoardSession:
    """Wire settings, logging and storage into a ready board session.

    Without an explicit ``storage`` the database from ``DATABASE_URL`` is
    initialised and used.
    """
    if configure_logging:
        setup_logging()
    if storage is None:
        init_db()
        storage = SqlKeyValueStorage()

    store = TaskStore(storage, stages=SETTINGS.stages, storage_key=SETTINGS.storage_key)
    logger.info("Board ready with stages %s", ", ".join(stage.key for stage in SETTINGS.stages))
    return BoardSession(store)
