"""JSON format of the persisted task collection.

Stored value is a JSON array of objects::

    {"id": "...", "title": "...", "description": "...",
     "status": "todo", "isPriority": false}

``stage`` is accepted in place of ``status`` when reading. Entries that would
break the collection invariants are dropped; optional fields are defaulted.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from kanban.domain.entities import TaskEntity

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "dynamic-kanban.tasks"


class CorruptStateError(ValueError):
    """Stored value is not a JSON array."""


def serialize_tasks(tasks: Iterable[TaskEntity]) -> str:
    return json.dumps(
        [
            {
                "id": task.id,
                "title": task.title,
                "description": task.description,
                "status": task.stage,
                "isPriority": task.is_priority,
            }
            for task in tasks
        ],
        ensure_ascii=False,
    )


def parse_tasks(raw: str, stage_keys: Iterable[str]) -> tuple[TaskEntity, ...]:
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise CorruptStateError(f"Stored tasks are not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise CorruptStateError(f"Stored tasks must be a list, got {type(data).__name__}")
    return sanitize_tasks(data, stage_keys)


def sanitize_tasks(entries: Sequence[Any], stage_keys: Iterable[str]) -> tuple[TaskEntity, ...]:
    valid_stages = set(stage_keys)
    tasks: list[TaskEntity] = []
    seen: set[str] = set()
    for entry in entries:
        task = _to_entity(entry, valid_stages)
        if task is None or task.id in seen:
            continue
        seen.add(task.id)
        tasks.append(task)

    dropped = len(entries) - len(tasks)
    if dropped:
        logger.warning("Dropped %s invalid stored task(s)", dropped)
    return tuple(tasks)


def _to_entity(entry: Any, valid_stages: set[str]) -> TaskEntity | None:
    if not isinstance(entry, dict):
        return None
    stage = entry.get("status", entry.get("stage"))
    task_id = entry.get("id")
    title = entry.get("title")
    if not isinstance(stage, str) or stage not in valid_stages:
        return None
    if not isinstance(task_id, str) or not task_id:
        return None
    if not isinstance(title, str) or not title.strip():
        return None

    description = entry.get("description")
    is_priority = entry.get("isPriority", False)
    return TaskEntity(
        id=task_id,
        title=title,
        description=description if isinstance(description, str) else "",
        stage=stage,
        is_priority=bool(is_priority),
    )
