"""Runtime configuration for the user access service.

Values are read from environment variables, optionally loaded from a
``.env`` file. Settings are only read by the entry points; the
application, persistence and service modules receive them explicitly.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

ENV_DB_HOST = "DB_HOST"
ENV_DB_PORT = "DB_PORT"
ENV_DB_USER = "DB_USER"
ENV_DB_PASSWORD = "DB_PASSWORD"
ENV_DB_NAME = "DB_NAME"
ENV_DB_DRIVER = "DB_DRIVER"
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_ROOT_PATH = "ROOT_PATH"

DEFAULT_DB_PORT = 3306
DEFAULT_DB_DRIVER = "mysql+aiomysql"
DEFAULT_PORT = 8080

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseModel):
    """Immutable service settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    db_host: str
    db_port: int = DEFAULT_DB_PORT
    db_user: str
    db_password: str = ""
    db_name: str
    db_driver: str = DEFAULT_DB_DRIVER
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    root_path: str = ""


def _int_setting(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer") from exc


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (``os.environ`` by default).

    When reading the process environment a ``.env`` file is loaded first.
    ``DB_HOST``, ``DB_USER`` and ``DB_NAME`` are required and a
    ``ValueError`` is raised to fail fast when one of them is missing.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    missing = [
        key for key in (ENV_DB_HOST, ENV_DB_USER, ENV_DB_NAME) if not environ.get(key)
    ]
    if missing:
        raise ValueError(f"{', '.join(missing)} must be set in the environment")

    return Settings(
        db_host=environ[ENV_DB_HOST],
        db_port=_int_setting(environ, ENV_DB_PORT, DEFAULT_DB_PORT),
        db_user=environ[ENV_DB_USER],
        db_password=environ.get(ENV_DB_PASSWORD, ""),
        db_name=environ[ENV_DB_NAME],
        db_driver=environ.get(ENV_DB_DRIVER) or DEFAULT_DB_DRIVER,
        host=environ.get(ENV_HOST) or "0.0.0.0",
        port=_int_setting(environ, ENV_PORT, DEFAULT_PORT),
        log_level=environ.get(ENV_LOG_LEVEL) or "INFO",
        root_path=environ.get(ENV_ROOT_PATH, ""),
    )


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger for an entry point."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
