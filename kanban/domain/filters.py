from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewParameters:
    search_text: str = ""
    priority_only: bool = False

    @property
    def query(self) -> str:
        return self.search_text.strip().lower()

    @property
    def is_active(self) -> bool:
        return bool(self.query) or self.priority_only
