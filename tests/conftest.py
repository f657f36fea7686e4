"""Shared pytest fixtures for the Flashcards test suite."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator

import pytest

from flashcards.core.settings import load_settings
from flashcards.session.console import plain_console
from flashcards.session.controller import SessionController


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Drop any cached Settings built from a test's monkeypatched env."""
    yield
    load_settings.cache_clear()


class Session:
    """A controller wired to an in-memory console, plus its captured output."""

    def __init__(self, *lines: str) -> None:
        self.buffer = io.StringIO()
        self._pending: list[str] = list(lines)
        self.controller = SessionController(
            console=plain_console(file=self.buffer),
            reader=self._next_line,
            encoding="utf-8",
        )

    def _next_line(self) -> str:
        if not self._pending:
            raise EOFError("scripted input exhausted")
        return self._pending.pop(0)

    def feed(self, *lines: str) -> Session:
        """Queue more typed lines."""
        self._pending.extend(lines)
        return self

    @property
    def pending(self) -> list[str]:
        return list(self._pending)

    def output(self) -> list[str]:
        """Return every printed line so far."""
        return self.buffer.getvalue().splitlines()

    def last(self) -> str:
        return self.output()[-1]


@pytest.fixture  # type: ignore[misc]
def session() -> Session:
    """A fresh session with an empty deck and no queued input."""
    return Session()


@pytest.fixture  # type: ignore[misc]
def make_session() -> Callable[..., Session]:
    """Factory for extra sessions (e.g. a second, empty deck for round trips)."""
    return Session
