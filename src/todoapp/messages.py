"""Console formatting for prompts, banners and save results."""

from __future__ import annotations

from enum import StrEnum

import click


class Color(StrEnum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    RESET = "reset"


SAVE_SUCCEEDED = "Your ToDo was saved successfully. 👏"
SAVE_FAILED = "Error in saving your ToDo. 😢"


def colored(text: str, color: Color = Color.RESET) -> str:
    """Wrap text in a foreground color marker followed by a reset marker"""
    if color is Color.RESET:
        return text
    return click.style(text, fg=color.value)


def print_colored(text: str, color: Color = Color.RESET) -> None:
    click.echo(colored(text, color))


def save_result_message(result: bool) -> tuple[str, Color]:
    if result:
        return SAVE_SUCCEEDED, Color.CYAN
    return SAVE_FAILED, Color.RED