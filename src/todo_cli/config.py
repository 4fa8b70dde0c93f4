# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read from disk at import time except a local .env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_TASKS_FILE = "tasks.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Console ----
    prompt: str

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        prompt = _env(_k("PROMPT"), "> ")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        tasks_path = _env_path(_k("TASKS_PATH"), Path(DEFAULT_TASKS_FILE))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            prompt=prompt,
            data_dir=data_dir,
            tasks_path=tasks_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
