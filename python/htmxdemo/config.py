"""Application settings loaded from HTMXDEMO_* environment variables."""

import logging
import os
import secrets
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from htmxdemo.errors import ConfigError
from htmxdemo.sessions import DEFAULT_IDLE_TIMEOUT
from htmxdemo.tasksearch import DEFAULT_TASKS_PATH

ENV_PREFIX = "HTMXDEMO"

DEFAULT_HTMX_URL = "https://unpkg.com/htmx.org@2.0.4"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    debug: bool = False
    secret_key: str = Field(default_factory=lambda: secrets.token_hex(32), repr=False)
    tasks_path: Path = DEFAULT_TASKS_PATH
    log_level: str = "INFO"
    htmx_url: str = DEFAULT_HTMX_URL
    session_timeout: float = Field(default=DEFAULT_IDLE_TIMEOUT, gt=0)

    @field_validator("log_level")
    @classmethod
    def log_level_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {v!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from the environment; unset or blank values keep defaults.

        Raises:
            ConfigError: If a variable holds a value of the wrong type.
        """
        environ = os.environ if environ is None else environ

        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}_{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid {ENV_PREFIX}_* settings:\n{e}") from e
