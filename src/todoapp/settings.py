from __future__ import annotations

import logging
from pathlib import Path

import click
from pydantic import Field
from pydantic.functional_validators import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings.main import SettingsConfigDict

APP_NAME = "todoapp"


def default_todo_file() -> Path:
    """Per-user data file, e.g. ~/.config/todoapp/todos.json on Linux"""
    return Path(click.get_app_dir(APP_NAME)) / "todos.json"


class Settings(BaseSettings):
    TODO_FILE: Path = Field(default_factory=default_todo_file)

    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("TODO_FILE")
    @classmethod
    def _todo_file(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("LOG_LEVEL")
    @classmethod
    def _log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
