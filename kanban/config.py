from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from kanban.domain.entities import Stage
from kanban.domain.stages import DEFAULT_STAGES_SPEC, parse_stages
from kanban.infra.serialization import DEFAULT_STORAGE_KEY


PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _env_files(env_name: str) -> list[tuple[Path, bool]]:
    """First `.env` and `.env.<APP_ENV>` found in the working directory or project root."""
    found = []
    for name, override in ((".env", False), (f".env.{env_name}", True)):
        path = next((base / name for base in (Path.cwd(), PROJECT_ROOT) if (base / name).exists()), None)
        if path is not None:
            found.append((path, override))
    return found


def load_env() -> None:
    for path, override in _env_files(os.getenv("APP_ENV", "development")):
        load_dotenv(path, override=override)


@dataclass(frozen=True)
class Settings:
    database_url: str
    stages: tuple[Stage, ...]
    storage_key: str = DEFAULT_STORAGE_KEY
    log_level: str = "INFO"
    log_dir: str = "logs"


load_env()

DATABASE_URL = os.getenv("DATABASE_URL", "").strip() or f"sqlite:///{PROJECT_ROOT / 'kanban.sqlite3'}"

SETTINGS = Settings(
    database_url=DATABASE_URL,
    stages=parse_stages(os.getenv("KANBAN_STAGES", DEFAULT_STAGES_SPEC)),
    storage_key=os.getenv("KANBAN_STORAGE_KEY", "").strip() or DEFAULT_STORAGE_KEY,
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
)
