from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import replace

from kanban.domain.entities import Stage, TaskEntity
from kanban.domain.stages import DEFAULT_STAGES, validate_stages
from kanban.infra.serialization import DEFAULT_STORAGE_KEY, parse_tasks, serialize_tasks
from kanban.infra.storage import KeyValueStorage

logger = logging.getLogger(__name__)


def new_task_id() -> str:
    return str(uuid.uuid4())


class TaskStore:
    """
    Owner of the canonical task collection.

    The collection is a tuple, newest task first. Every successful mutation
    builds a new tuple and persists it before returning. Rejected mutations
    leave both the collection and the storage untouched. Storage failures are
    logged and never undo the in-memory change.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        stages: Iterable[Stage] = DEFAULT_STAGES,
        storage_key: str = DEFAULT_STORAGE_KEY,
        id_factory: Callable[[], str] = new_task_id,
    ) -> None:
        self._storage = storage
        self._stages = validate_stages(stages)
        self._stage_keys = frozenset(stage.key for stage in self._stages)
        self._storage_key = storage_key
        self._id_factory = id_factory
        self._tasks: tuple[TaskEntity, ...] = self._load()
        logger.info("TaskStore ready key=%s total=%s", storage_key, len(self._tasks))

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    def list(self) -> tuple[TaskEntity, ...]:
        return self._tasks

    def get(self, task_id: str) -> TaskEntity | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def create(self, title: str, description: str = "") -> TaskEntity | None:
        title = title.strip()
        if not title:
            logger.debug("Rejected task without title")
            return None

        task = TaskEntity(
            id=self._id_factory(),
            title=title,
            description=description.strip(),
            stage=self._stages[0].key,
        )
        self._commit((task, *self._tasks))
        return task

    def move(self, task_id: str, target_stage: str) -> TaskEntity | None:
        if target_stage not in self._stage_keys:
            logger.warning("Ignored move of %s to unknown stage %r", task_id, target_stage)
            return None
        task = self.get(task_id)
        if task is None or task.stage == target_stage:
            logger.debug("Move of %s to %s is a no-op", task_id, target_stage)
            return None
        return self._replace(replace(task, stage=target_stage))

    def toggle_priority(self, task_id: str) -> TaskEntity | None:
        task = self.get(task_id)
        if task is None:
            logger.debug("Priority toggle ignored, unknown task %s", task_id)
            return None
        return self._replace(replace(task, is_priority=not task.is_priority))

    def update(self, task_id: str, title: str, description: str = "") -> TaskEntity | None:
        """Replace title and description. Identical trimmed values are a no-op and skip the write."""
        task = self.get(task_id)
        title = title.strip()
        if task is None or not title:
            logger.debug("Update of %s rejected", task_id)
            return None

        updated = replace(task, title=title, description=description.strip())
        if updated == task:
            return None
        return self._replace(updated)

    def delete(self, task_id: str) -> bool:
        remaining = tuple(t for t in self._tasks if t.id != task_id)
        if len(remaining) == len(self._tasks):
            logger.debug("Delete ignored, unknown task %s", task_id)
            return False
        self._commit(remaining)
        return True

    def _replace(self, updated: TaskEntity) -> TaskEntity:
        self._commit(tuple(updated if t.id == updated.id else t for t in self._tasks))
        return updated

    def _commit(self, tasks: tuple[TaskEntity, ...]) -> None:
        self._tasks = tasks
        self._persist()

    def _persist(self) -> None:
        try:
            saved = self._storage.write(self._storage_key, serialize_tasks(self._tasks))
        except Exception:  # noqa: BLE001
            logger.warning("Unable to save tasks to %s", self._storage_key, exc_info=True)
            return
        if not saved:
            logger.warning("Unable to save tasks to %s", self._storage_key)

    def _load(self) -> tuple[TaskEntity, ...]:
        try:
            raw = self._storage.read(self._storage_key)
            if not raw:
                return ()
            return parse_tasks(raw, self._stage_keys)
        except Exception:  # noqa: BLE001
            logger.warning("Unable to read tasks from %s", self._storage_key, exc_info=True)
            return ()
