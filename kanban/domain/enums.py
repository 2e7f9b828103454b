from __future__ import annotations

from enum import StrEnum


class StageKey(StrEnum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"
