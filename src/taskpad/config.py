# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a local default.
- Local data (storage file, logs) lives under a gitignored data dir.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKPAD"

# Same ballpark as browser localStorage per origin.
DEFAULT_STORAGE_QUOTA_BYTES = 5 * 1024 * 1024


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


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

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path

    # ---- Storage ----
    storage_key: str
    storage_quota_bytes: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "local_storage.json")

        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"
        storage_quota_bytes = _env_int(_k("STORAGE_QUOTA_BYTES"), DEFAULT_STORAGE_QUOTA_BYTES)
        if storage_quota_bytes <= 0:
            storage_quota_bytes = DEFAULT_STORAGE_QUOTA_BYTES

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            storage_path=storage_path,
            storage_key=storage_key,
            storage_quota_bytes=storage_quota_bytes,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
