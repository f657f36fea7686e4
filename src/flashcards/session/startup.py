"""Startup argument parsing.

The program takes flag/value pairs::

    flashcards -import deck.txt -export deck.txt

``-import`` loads a file before the first menu; ``-export`` saves the deck
when the user chooses ``exit``. Pairs are read left to right and a repeated
flag keeps its last value.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

IMPORT_FLAG = "-import"
EXPORT_FLAG = "-export"


class UnknownFlagError(ValueError):
    """Raised when a flag position holds anything but a known flag."""

    def __init__(self, flag: str) -> None:
        super().__init__(f"unknown startup flag: {flag!r}")
        self.flag = flag


@dataclass(frozen=True, slots=True)
class StartupOptions:
    """Paths supplied on the command line; empty string means not given."""

    import_path: str = ""
    export_path: str = ""


def parse_startup_args(args: Sequence[str]) -> StartupOptions | None:
    """Turn the raw argument list into :class:`StartupOptions`.

    Returns
    -------
    StartupOptions | None
        Default options for an empty list, ``None`` for an odd-length list
        (no session should start).

    Raises
    ------
    UnknownFlagError
        If a flag position holds an unrecognised token.
    """
    if len(args) % 2:
        return None

    import_path = ""
    export_path = ""
    for flag, value in zip(args[::2], args[1::2], strict=True):
        if flag == IMPORT_FLAG:
            import_path = value
        elif flag == EXPORT_FLAG:
            export_path = value
        else:
            raise UnknownFlagError(flag)
    return StartupOptions(import_path=import_path, export_path=export_path)


__all__ = ["StartupOptions", "UnknownFlagError", "parse_startup_args", "IMPORT_FLAG", "EXPORT_FLAG"]
