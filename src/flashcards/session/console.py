"""
Console I/O wrapper that keeps the transcript in step with the terminal.

Every user-facing line goes through :meth:`SessionIO.say` and every typed line
through :meth:`SessionIO.read`, so the transcript handed in at construction
sees the whole dialogue in order.

The Rich console supplies the output stream and line input, but lines are
written to its stream directly rather than rendered. Rich rendering rewrites
tabs and control characters, and the screen must show exactly what the
transcript records.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import IO

from rich.console import Console

from flashcards.core.transcript import Transcript

Reader = Callable[[], str]


def plain_console(file: IO[str] | None = None) -> Console:
    """Build a Rich console with markup, emoji and highlighting off (stdout unless ``file``)."""
    return Console(file=file, markup=False, emoji=False, highlight=False, soft_wrap=True)


class SessionIO:
    """
    Line-oriented terminal I/O bound to one :class:`Transcript`.

    Parameters
    ----------
    transcript : Transcript
        Buffer that receives every printed and typed line.
    console : Console | None
        Rich console used for output; defaults to a plain stdout console.
    reader : Callable[[], str] | None
        Returns one typed line without its line break. Defaults to
        ``console.input``. Raises ``EOFError`` when input is exhausted.
    """

    def __init__(
        self,
        transcript: Transcript,
        *,
        console: Console | None = None,
        reader: Reader | None = None,
    ) -> None:
        self.transcript = transcript
        self.console = console if console is not None else plain_console()
        self._reader: Reader = reader if reader is not None else self.console.input

    def say(self, message: str) -> None:
        """Print one line verbatim and record it."""
        stream = self.console.file
        stream.write(f"{message}\n")
        stream.flush()
        self.transcript.record_output(message)

    def read(self) -> str:
        """Read one line and record it."""
        line = self._reader()
        self.transcript.record_input(line)
        return line

    def ask(self, prompt: str) -> str:
        """Print ``prompt`` on its own line, then read the answer."""
        self.say(prompt)
        return self.read()


__all__ = ["SessionIO", "plain_console", "Reader"]
