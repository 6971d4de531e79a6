import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "clinic-console"
APP_AUTHOR = "clinic-console"

DEFAULT_NOTICE_TIMEOUT_SECONDS = 5.0
DEFAULT_TICK_MS = 250


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _resolve_data_dir() -> Path:
    env_dir = os.getenv("CLINICCONSOLE_DATA_DIR")
    if env_dir:
        return Path(env_dir)
    return Path(user_data_dir(APP_NAME, APP_AUTHOR))


DATA_DIR = _resolve_data_dir()
LOG_DIR = DATA_DIR / "logs"
DB_FILE = Path(os.getenv("CLINICCONSOLE_DB_FILE") or (DATA_DIR / "clinic.db"))

DATA_DIR.mkdir(parents=True, exist_ok=True)
LOG_DIR.mkdir(parents=True, exist_ok=True)
DB_FILE.parent.mkdir(parents=True, exist_ok=True)


def default_database_url() -> str:
    # SQLite URL uses forward slashes; as_posix() keeps it cross-platform.
    return f"sqlite:///{DB_FILE.as_posix()}"


@dataclass(frozen=True)
class Settings:
    database_url: str = os.getenv("DATABASE_URL", default_database_url())
    echo_sql: bool = _env_bool("SQL_ECHO", False)
    notice_timeout_seconds: float = _env_float("CLINICCONSOLE_NOTICE_TIMEOUT", DEFAULT_NOTICE_TIMEOUT_SECONDS)
    tick_ms: int = _env_int("CLINICCONSOLE_TICK_MS", DEFAULT_TICK_MS)


settings = Settings()
