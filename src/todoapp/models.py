from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    # Kept as-is when loaded from disk, so ids survive restarts
    id: str = Field(default_factory=lambda: str(uuid4()), frozen=True)
    title: str = ""
    completed: bool = False

    def __str__(self) -> str:
        return f"{self.title}: is {'Completed. 👏' if self.completed else 'not completed yet. 🤦'}"


class TodoList(BaseModel):
    """Whole-list document written by the file cache"""

    todos: list[Todo] = []
