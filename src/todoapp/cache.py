from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from todoapp.logging_utils import logger
from todoapp.models import Todo, TodoList
from todoapp.settings import Settings


class Storage(Enum):
    MEMORY = "1"
    FILE = "2"


class Cache(Protocol):
    """Whole-list storage. Neither method raises."""

    def read_todos(self) -> list[Todo]: ...

    def save_todos(self, todos: Sequence[Todo]) -> bool: ...


class InMemoryCache:
    """Keeps todos for the current session only"""

    def __init__(self) -> None:
        self._todos: list[Todo] = []

    def read_todos(self) -> list[Todo]:
        return [todo.model_copy() for todo in self._todos]

    def save_todos(self, todos: Sequence[Todo]) -> bool:
        self._todos = [todo.model_copy() for todo in todos]
        return True


class JSONFileCache:
    """
    Stores the whole list as one JSON document.

    Every save overwrites the file. A missing or unreadable file reads as an empty list.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def read_todos(self) -> list[Todo]:
        try:
            data = self.path.read_bytes()
            return TodoList.model_validate_json(data).todos
        except FileNotFoundError:
            return []
        except (OSError, ValidationError) as exc:
            logger.warning(f"Could not read todos from {self.path}: {exc}")
            return []

    def save_todos(self, todos: Sequence[Todo]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as of:
                of.write(TodoList(todos=list(todos)).model_dump_json(indent=2))
        except OSError:
            logger.exception(f"Error in saving todos to {self.path}")
            return False

        logger.debug(f"Saved {len(todos)} todos to {self.path}.")
        return True


def create_cache(storage: Storage, *, settings: Settings) -> Cache:
    match storage:
        case Storage.MEMORY:
            return InMemoryCache()
        case Storage.FILE:
            return JSONFileCache(settings.TODO_FILE)
        case _:
            raise ValueError(f"Unsupported storage: {storage}")
