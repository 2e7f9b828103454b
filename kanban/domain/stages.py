"""Workflow stage configuration.

A stage set is an ordered tuple of :class:`Stage`. The first stage is where
new tasks land. ``KANBAN_STAGES`` uses ``key:label`` pairs separated by
commas, e.g. ``todo:To Do,in-progress:In Progress,done:Done``.
"""
from __future__ import annotations

from collections.abc import Iterable

from .entities import Stage
from .enums import StageKey

DEFAULT_STAGES: tuple[Stage, ...] = (
    Stage(StageKey.TODO.value, "To Do"),
    Stage(StageKey.IN_PROGRESS.value, "In Progress"),
    Stage(StageKey.DONE.value, "Done"),
)

DEFAULT_STAGES_SPEC = ",".join(f"{stage.key}:{stage.label}" for stage in DEFAULT_STAGES)


def parse_stages(raw: str) -> tuple[Stage, ...]:
    stages = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        key, _, label = chunk.partition(":")
        key = key.strip()
        stages.append(Stage(key, label.strip() or key))
    return validate_stages(stages)


def validate_stages(stages: Iterable[Stage]) -> tuple[Stage, ...]:
    result = tuple(stages)
    if not result:
        raise ValueError("At least one stage must be configured.")
    seen: set[str] = set()
    for stage in result:
        if not stage.key:
            raise ValueError("Stage keys must be non-empty.")
        if stage.key in seen:
            raise ValueError(f"Duplicate stage key: {stage.key}")
        seen.add(stage.key)
    return result
