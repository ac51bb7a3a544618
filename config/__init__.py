"""Settings for the payout engine.

``APP_ENV`` picks one of the sibling modules (``development`` when unset or
unknown). Each module exposes ``DB_CONFIG``, ``DEBUG``, ``LOG_LEVEL`` and
``AUTO_INIT_DB``; database settings can be overridden through ``DB_*``.
"""

import importlib
import os
from pathlib import Path
from types import ModuleType
from typing import Optional

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "database" / "schema.sql"

DEFAULT_SETTINGS = "config.development"

_ENVIRONMENTS = {
    "dev": "config.development",
    "development": "config.development",
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}

_TRUTHY = {"1", "true", "yes", "on"}


def get_settings_module(env: Optional[str] = None) -> str:
    name = env if env is not None else os.getenv("APP_ENV", "")
    return _ENVIRONMENTS.get(name.strip().lower(), DEFAULT_SETTINGS)


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return raw.lower() in _TRUTHY


def db_config_from_env(*, database: str, user: str = "root") -> dict:
    """mysql-connector keyword arguments, each overridable by a DB_* variable."""
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", user),
        "password": os.getenv("DB_PASSWORD", ""),
        "database": os.getenv("DB_NAME", database),
    }
