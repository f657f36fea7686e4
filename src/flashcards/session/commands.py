"""Menu commands.

The menu is a closed set of variants keyed by their exact display string.
``TRY_AGAIN`` is the fallback for anything the user types that is not a real
command; it is never listed in the prompt.
"""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    """One menu entry; the value is the exact text the user types."""

    TRY_AGAIN = "try again"
    ADD = "add"
    REMOVE = "remove"
    IMPORT = "import"
    EXPORT = "export"
    ASK = "ask"
    EXIT = "exit"
    LOG = "log"
    HARDEST = "hardest card"
    RESET = "reset stats"

    @classmethod
    def parse(cls, raw: str) -> Command:
        """Map a typed line to its command; no trimming or case folding."""
        return _BY_TEXT.get(raw, cls.TRY_AGAIN)


_BY_TEXT: dict[str, Command] = {command.value: command for command in Command}

MENU_COMMANDS: tuple[Command, ...] = tuple(c for c in Command if c is not Command.TRY_AGAIN)


def menu_prompt() -> str:
    """Return the line printed before every command read."""
    return f"Input the action ({', '.join(c.value for c in MENU_COMMANDS)}):"


__all__ = ["Command", "MENU_COMMANDS", "menu_prompt"]
