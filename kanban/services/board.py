from __future__ import annotations

from dataclasses import replace

from kanban.domain.entities import Stage, TaskEntity
from kanban.domain.filters import ViewParameters

from .task_store import TaskStore
from .view_projector import ColumnSummary, Grouped, ViewProjector


class BoardSession:
    """
    Presentation-facing facade over a task store.

    Holds the caller's view parameters and recomputes projections lazily:
    the grouping is reused while the store returns the same collection
    object, the filtered grouping while both the grouping and the view
    parameters are unchanged.
    """

    def __init__(self, store: TaskStore, projector: ViewProjector | None = None) -> None:
        self.store = store
        self.projector = projector or ViewProjector(store.stages)
        self._params = ViewParameters()
        self._grouped_cache: tuple[tuple[TaskEntity, ...], Grouped] | None = None
        self._filtered_cache: tuple[Grouped, ViewParameters, Grouped] | None = None

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self.projector.stages

    @property
    def params(self) -> ViewParameters:
        return self._params

    # ---- mutations ----

    def create_task(self, title: str, description: str = "") -> TaskEntity | None:
        return self.store.create(title, description)

    def move_task(self, task_id: str, target_stage: str) -> TaskEntity | None:
        return self.store.move(task_id, target_stage)

    def toggle_task_priority(self, task_id: str) -> TaskEntity | None:
        return self.store.toggle_priority(task_id)

    def update_task(self, task_id: str, title: str, description: str = "") -> TaskEntity | None:
        return self.store.update(task_id, title, description)

    def delete_task(self, task_id: str) -> bool:
        return self.store.delete(task_id)

    # ---- view parameters ----

    def set_search_text(self, text: str) -> None:
        self._params = replace(self._params, search_text=text)

    def clear_search(self) -> None:
        self.set_search_text("")

    def set_priority_only(self, enabled: bool) -> None:
        self._params = replace(self._params, priority_only=enabled)

    def toggle_priority_only(self) -> None:
        self.set_priority_only(not self._params.priority_only)

    # ---- projections ----

    def tasks(self) -> tuple[TaskEntity, ...]:
        return self.store.list()

    def total_count(self) -> int:
        return len(self.store.list())

    def grouped(self) -> Grouped:
        tasks = self.store.list()
        if self._grouped_cache is None or self._grouped_cache[0] is not tasks:
            self._grouped_cache = (tasks, self.projector.group_by_stage(tasks))
        return self._grouped_cache[1]

    def counts_by_stage(self) -> dict[str, int]:
        return self.projector.counts_by_stage(self.grouped())

    def filtered(self) -> Grouped:
        grouped = self.grouped()
        cached = self._filtered_cache
        if cached is None or cached[0] is not grouped or cached[1] != self._params:
            filtered = self.projector.apply_filters(
                grouped, self._params.search_text, self._params.priority_only
            )
            self._filtered_cache = (grouped, self._params, filtered)
        return self._filtered_cache[2]

    def visible_count(self) -> int:
        return self.projector.visible_count(self.filtered())

    def has_active_filters(self) -> bool:
        return self._params.is_active

    def filter_summary(self) -> str | None:
        if not self.has_active_filters():
            return None
        return f"Showing {self.visible_count()} of {self.total_count()} tasks"

    def columns(self) -> list[ColumnSummary]:
        return self.projector.column_summaries(
            self.filtered(), self.counts_by_stage(), self.has_active_filters()
        )
