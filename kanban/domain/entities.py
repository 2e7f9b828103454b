from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Stage:
    key: str
    label: str


@dataclass(frozen=True)
class TaskEntity:
    id: str
    title: str
    description: str
    stage: str
    is_priority: bool = False
