from __future__ import annotations

from collections.abc import Callable

import pytest

from todoapp.settings import Settings


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    # Keep a developer's .env or exported variables out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TODO_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return Settings(TODO_FILE=tmp_path / "data" / "todos.json")


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[], str | None]]:
    """Build a read_line callable that replays the given lines, then signals end of input."""

    def _make(*lines: str) -> Callable[[], str | None]:
        remaining = iter(lines)
        return lambda: next(remaining, None)

    return _make
