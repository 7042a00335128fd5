from __future__ import annotations

import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path

import click
from pydantic import ValidationError

from todoapp.cache import Storage, create_cache
from todoapp.logging_utils import logger, set_level
from todoapp.manager import TodoManager
from todoapp.messages import Color, print_colored
from todoapp.models import Todo
from todoapp.settings import Settings

WELCOME = "********* Welcome to Awesome ToDo *********"
COMMAND_QUESTION = (
    "Please choose what do you want to do from the following list (Enter the command name or the command number):"
)
STORAGE_QUESTION = "Where do you want to save your ToDo list (Enter the number of save option)?"
STORAGE_OPTIONS = "1. Memory\n2. File System\n"


class Command(Enum):
    ADD = 1
    LIST = 2
    TOGGLE = 3
    DELETE = 4
    EXIT = 5

    @property
    def label(self) -> str:
        return f"{self.value}. {self.name.capitalize()}"

    @classmethod
    def parse(cls, text: str) -> Command | None:
        """Accept either the command number or its name (case-insensitive)"""
        token = text.strip().lower()
        for command in cls:
            if token in (str(command.value), command.name.lower()):
                return command
        return None

    @classmethod
    def menu(cls) -> str:
        return "\n".join(command.label for command in cls)


def _read_stdin() -> str | None:
    try:
        return input()
    except EOFError:
        return None


def _parse_position(text: str | None) -> int | None:
    try:
        return int((text or "").strip())
    except ValueError:
        return None


class App:
    """
    Interactive loop: choose a storage, then read and run one command per line.

    The loop ends on the exit command or at end of input.
    """

    def __init__(self, settings: Settings, *, read_line: Callable[[], str | None] = _read_stdin) -> None:
        self.settings = settings
        self.read_line = read_line
        self.todo_manager: TodoManager | None = None

    def choose_storage(self) -> Storage | None:
        while True:
            print_colored(STORAGE_QUESTION, Color.GREEN)
            print_colored(STORAGE_OPTIONS)

            answer = self.read_line()
            if answer is None:
                return None
            try:
                return Storage(answer.strip())
            except ValueError:
                pass

            print_colored("Can not understand your choice, Do you want to continue (y/n)?")
            reply = self.read_line()
            if reply is None or reply.strip() == "n":
                return None

    def print_menu(self) -> None:
        print_colored(COMMAND_QUESTION, Color.GREEN)
        print_colored(Command.menu())

    def run(self, storage: Storage | None = None) -> int:
        print_colored(WELCOME, Color.MAGENTA)

        if storage is None:
            storage = self.choose_storage()
            if storage is None:
                logger.info("No storage chosen, exiting.")
                return 0

        logger.info(f"Using {storage.name.lower()} storage.")
        self.todo_manager = TodoManager(create_cache(storage, settings=self.settings))

        self.print_menu()
        while (line := self.read_line()) is not None:
            if not self.dispatch(line):
                break
            self.print_menu()

        return 0

    def dispatch(self, line: str) -> bool:
        """Run one command. Returns False when the loop should stop."""
        assert self.todo_manager is not None, "Storage has not been chosen yet."

        match Command.parse(line):
            case Command.ADD:
                self._add()
            case Command.LIST:
                self.todo_manager.list_todos()
            case Command.TOGGLE:
                self._act_on_position("toggle", self.todo_manager.toggle_todo)
            case Command.DELETE:
                self._act_on_position("delete", self.todo_manager.delete_todo)
            case Command.EXIT:
                return False
            case _:
                print_colored("Can not understand your command!!", Color.RED)
        return True

    def _add(self) -> None:
        print_colored("Enter the ToDo Title: ", Color.GREEN)
        title = self.read_line() or ""
        self.todo_manager.add_todo(Todo(title=title))
        print_colored("Your todo added successfully. 👍", Color.CYAN)

    def _act_on_position(self, verb: str, action: Callable[[int | None], bool | None]) -> None:
        if self.todo_manager.number_of_todos == 0:
            self.todo_manager.list_todos()
            return

        print_colored(f"Which ToDo you want to {verb} (Enter the number of the ToDo)?", Color.GREEN)
        self.todo_manager.list_todos()
        result = action(_parse_position(self.read_line()))
        self.todo_manager.list_todos()
        if result:
            print_colored(f"Your todo {verb}d successfully. 👍", Color.CYAN)


@click.command(help="Manage your ToDo list interactively.")
@click.option(
    "-s",
    "--storage",
    type=click.Choice(["memory", "file"], case_sensitive=False),
    help="Storage to use. Asked interactively when not given.",
)
@click.option(
    "-f",
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File used by file storage. Defaults to TODO_FILE or the user app dir.",
)
@click.option("--log-level", help="Log level, e.g. debug. Defaults to LOG_LEVEL or WARNING.")
def cli(storage: str | None, data_file: Path | None, log_level: str | None) -> None:
    """
    Run the ToDo app

    Usage:
        todo
        todo --storage file --data-file ./todos.json

        LOG_LEVEL=debug todo # Enable debug logging
    """
    overrides = {"TODO_FILE": data_file, "LOG_LEVEL": log_level}
    try:
        settings = Settings(**{key: value for key, value in overrides.items() if value is not None})
    except ValidationError as exc:
        raise click.UsageError(str(exc)) from exc
    set_level(settings.LOG_LEVEL, logger=logger)

    chosen = Storage[storage.upper()] if storage else None
    sys.exit(App(settings).run(chosen))


if __name__ == "__main__":
    cli()
