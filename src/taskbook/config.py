# src/taskbook/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk except the local .env file.
- Every value has a sane default so the app starts with an empty environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKBOOK"

BACKEND_MEMORY = "memory"
BACKEND_PERSISTENT = "persistent"
BACKENDS = (BACKEND_MEMORY, BACKEND_PERSISTENT)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("%s=%r is not one of %s; using %r", name, raw, ", ".join(choices), default)
        return default
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    backend: str
    seed_defaults: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    id_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskbook").strip() or "taskbook"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        backend = _env_choice(_k("BACKEND"), BACKENDS, BACKEND_PERSISTENT)
        seed_defaults = _env_bool(_k("SEED_DEFAULTS"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskbook"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        id_path = _env_path(_k("ID_PATH"), data_dir / "id.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            backend=backend,
            seed_defaults=seed_defaults,
            data_dir=data_dir,
            tasks_path=tasks_path,
            id_path=id_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Build settings on first use (loading .env without overriding real env vars)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
