from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from kanban.domain.entities import Stage, TaskEntity
from kanban.domain.filters import ViewParameters
from kanban.domain.stages import DEFAULT_STAGES, validate_stages

Grouped = Mapping[str, tuple[TaskEntity, ...]]

EMPTY_FILTERED = "No tasks match your filters."
EMPTY_COLUMN = "No tasks here yet. Drop a card to get started."


@dataclass(frozen=True)
class ColumnSummary:
    key: str
    label: str
    tasks: tuple[TaskEntity, ...]
    total: int
    badge: str
    empty_message: str | None


class ViewProjector:
    """Derives per-stage views from a task collection. Never mutates its inputs."""

    def __init__(self, stages: Iterable[Stage] = DEFAULT_STAGES) -> None:
        self._stages = validate_stages(stages)

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    def group_by_stage(self, tasks: Sequence[TaskEntity]) -> dict[str, tuple[TaskEntity, ...]]:
        grouped: dict[str, list[TaskEntity]] = {stage.key: [] for stage in self._stages}
        for task in tasks:
            if task.stage in grouped:
                grouped[task.stage].append(task)
        return {key: tuple(column) for key, column in grouped.items()}

    def counts_by_stage(self, grouped: Grouped) -> dict[str, int]:
        return {stage.key: len(grouped.get(stage.key, ())) for stage in self._stages}

    def apply_filters(self, grouped: Grouped, search_text: str = "", priority_only: bool = False) -> Grouped:
        params = ViewParameters(search_text, priority_only)
        if not params.is_active:
            return grouped

        query = params.query
        return {
            stage.key: tuple(
                task for task in grouped.get(stage.key, ()) if _matches(task, query, priority_only)
            )
            for stage in self._stages
        }

    def visible_count(self, filtered: Grouped) -> int:
        return sum(len(filtered.get(stage.key, ())) for stage in self._stages)

    @staticmethod
    def has_active_filters(search_text: str = "", priority_only: bool = False) -> bool:
        return ViewParameters(search_text, priority_only).is_active

    def column_summaries(self, filtered: Grouped, counts: Mapping[str, int], filters_active: bool) -> list[ColumnSummary]:
        summaries = []
        for stage in self._stages:
            tasks = tuple(filtered.get(stage.key, ()))
            total = counts.get(stage.key, 0)
            badge = f"{len(tasks)}/{total}" if filters_active else str(len(tasks))
            empty_message = None
            if not tasks:
                empty_message = EMPTY_FILTERED if filters_active and total > 0 else EMPTY_COLUMN
            summaries.append(ColumnSummary(stage.key, stage.label, tasks, total, badge, empty_message))
        return summaries


def _matches(task: TaskEntity, query: str, priority_only: bool) -> bool:
    if priority_only and not task.is_priority:
        return False
    if not query:
        return True
    return query in task.title.lower() or query in task.description.lower()
