from __future__ import annotations

import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from kanban.infra.db import init_db
from kanban.infra.storage import SqlKeyValueStorage, StorageError
from kanban.services.task_store import TaskStore


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    engine.dispose()


def test_read_missing_key_returns_none(session_factory) -> None:
    assert SqlKeyValueStorage(session_factory).read("absent") is None


def test_write_then_overwrite(session_factory) -> None:
    storage = SqlKeyValueStorage(session_factory)

    assert storage.write("k", "one") is True
    assert storage.write("k", "two") is True

    assert storage.read("k") == "two"


def test_task_store_round_trip_through_database(session_factory) -> None:
    store = TaskStore(SqlKeyValueStorage(session_factory))
    task = store.create("Fix bug", "in parser")
    store.toggle_priority(task.id)

    reloaded = TaskStore(SqlKeyValueStorage(session_factory))

    assert reloaded.list() == store.list()


def test_missing_table_is_reported() -> None:
    engine = create_engine("sqlite://", poolclass=StaticPool)
    storage = SqlKeyValueStorage(sessionmaker(bind=engine))

    with pytest.raises(StorageError):
        storage.read("k")
    assert storage.write("k", "v") is False


def test_task_store_survives_broken_database(caplog) -> None:
    engine = create_engine("sqlite://", poolclass=StaticPool)

    with caplog.at_level(logging.WARNING):
        store = TaskStore(SqlKeyValueStorage(sessionmaker(bind=engine)))
        task = store.create("Fix bug")

    assert store.list() == (task,)
    assert "Unable to read tasks" in caplog.text
    assert "Unable to save tasks" in caplog.text
