"""Interactive session: menu commands, console I/O and the controller loop."""

from __future__ import annotations

from .commands import Command, menu_prompt
from .console import SessionIO
from .controller import SessionController
from .startup import StartupOptions, UnknownFlagError, parse_startup_args

__all__ = [
    "Command",
    "menu_prompt",
    "SessionIO",
    "SessionController",
    "StartupOptions",
    "UnknownFlagError",
    "parse_startup_args",
]
