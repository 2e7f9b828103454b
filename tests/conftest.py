from __future__ import annotations

import pytest

from kanban.infra.storage import StorageError


class FakeStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []
        self.fail_reads = False
        self.fail_writes = False
        self.write_error: Exception | None = None

    def read(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError("storage offline")
        return self.data.get(key)

    def write(self, key: str, value: str) -> bool:
        self.writes.append((key, value))
        if self.write_error is not None:
            raise self.write_error
        if self.fail_writes:
            return False
        self.data[key] = value
        return True


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()
