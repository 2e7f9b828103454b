from __future__ import annotations

import pytest

from kanban.domain.entities import Stage
from kanban.domain.stages import DEFAULT_STAGES, DEFAULT_STAGES_SPEC, parse_stages


def test_default_stage_string_parses_to_default_stages() -> None:
    assert parse_stages(DEFAULT_STAGES_SPEC) == DEFAULT_STAGES
    assert [s.key for s in DEFAULT_STAGES] == ["todo", "in-progress", "done"]


def test_parse_stages_labels_default_to_key() -> None:
    assert parse_stages(" backlog:Backlog , review ,") == (
        Stage("backlog", "Backlog"),
        Stage("review", "review"),
    )


@pytest.mark.parametrize("raw", ["", " , ", "todo,todo", ":Label"])
def test_parse_stages_rejects_invalid(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_stages(raw)
