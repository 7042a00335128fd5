from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from todoapp.cache import Cache
from todoapp.logging_utils import logger
from todoapp.messages import Color, print_colored, save_result_message
from todoapp.models import Todo

# More open todos than this and the list counts as busy
BUSY_THRESHOLD = 3


class Summary(Enum):
    EMPTY = "\nYou do not have any ToDos in your list yet. ⁉️\n"
    BUSY = "\nYou have many things todo 🏃‍♂️\n"
    ALL_DONE = "\nYou are hero you did all your ToDos 💯💯\n"
    KEEP_GOING = "\nLet's keep going and finish our ToDos 😓\n"


def summarize(todos: Sequence[Todo]) -> Summary:
    """Classify a list by how many of its todos are still open"""
    if not todos:
        return Summary.EMPTY

    not_completed = sum(1 for todo in todos if not todo.completed)
    if not_completed > BUSY_THRESHOLD:
        return Summary.BUSY
    if not_completed == 0:
        return Summary.ALL_DONE
    return Summary.KEEP_GOING


class TodoManager:
    """
    Read-modify-write operations on a cache.

    Nothing is kept between calls: every operation reads the full list, changes
    a copy and saves the full list back.
    """

    def __init__(self, cache: Cache, *, echo: Callable[[str, Color], None] = print_colored) -> None:
        self.cache = cache
        self.echo = echo

    @property
    def number_of_todos(self) -> int:
        return len(self.cache.read_todos())

    def _save(self, todos: list[Todo]) -> bool:
        result = self.cache.save_todos(todos)
        self.echo(*save_result_message(result))
        return result

    def _index(self, position: int | None, todos: list[Todo]) -> int | None:
        """Map a 1-based position to a list index, or None when it is out of range"""
        if position is None or position <= 0 or position > len(todos):
            logger.debug(f"Ignoring position {position} for a list of {len(todos)} todos.")
            return None
        return position - 1

    def add_todo(self, todo: Todo) -> bool:
        todos = self.cache.read_todos()
        todos.append(todo)
        return self._save(todos)

    def toggle_todo(self, position: int | None) -> bool | None:
        """Mark the todo at `position` as completed. It is never set back to not completed."""
        todos = self.cache.read_todos()
        index = self._index(position, todos)
        if index is None:
            return None

        todos[index].completed = True
        return self._save(todos)

    def delete_todo(self, position: int | None) -> bool | None:
        todos = self.cache.read_todos()
        index = self._index(position, todos)
        if index is None:
            return None

        del todos[index]
        return self._save(todos)

    def list_todos(self) -> Summary:
        todos = self.cache.read_todos()
        summary = summarize(todos)

        if summary is Summary.EMPTY:
            self.echo(summary.value, Color.YELLOW)
            return summary

        self.echo("\n📝 Your ToDo List:", Color.RESET)
        for i, todo in enumerate(todos, 1):
            marker = "✅ " if todo.completed else "☑️"
            self.echo(f"{i}. {marker} {todo}", Color.RESET)

        self.echo(summary.value, Color.RESET)
        return summary
