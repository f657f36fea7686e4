# src/flashcards/cli.py
"""
Flashcards Command Line Interface (CLI).

This module wires the interactive session to the terminal using `typer`.
The program takes no named options of its own, not even `--help`: the raw
argument list is read as flag/value pairs (see :mod:`flashcards.session.startup`).

Usage
-----
    # Empty deck
    $ flashcards

    # Load a deck first, save it again on exit
    $ flashcards -import capitals.txt -export capitals.txt

Exit codes
----------
- 0: the user chose ``exit``, input ended, or an odd-length argument list was
  given (nothing runs).
- 1: an unknown startup flag, `--help` and `-h` among them.
"""

from __future__ import annotations

import typer
from dotenv import load_dotenv
from rich.console import Console

from flashcards.core.settings import get_logger
from flashcards.session.console import plain_console
from flashcards.session.controller import SessionController
from flashcards.session.startup import UnknownFlagError, parse_startup_args

# Ensure env vars (like LOG_LEVEL) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help="Flashcards: learn term/definition pairs in the terminal.",
    rich_markup_mode="markdown",
    add_completion=False,
)
console: Console = plain_console()
logger = get_logger("flashcards.cli")


# Fixed (MyPy): Untyped decorator workaround
@app.command(  # type: ignore[misc]
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(ctx: typer.Context) -> None:
    """
    Start an interactive flashcard session.

    Accepts `-import <file>` and `-export <file>` flag/value pairs.
    """
    args = list(ctx.args)

    try:
        options = parse_startup_args(args)
    except UnknownFlagError as e:
        logger.info("rejected startup arguments: %s", e)
        console.print("wrong parameters")
        raise typer.Exit(code=1) from e

    if options is None:
        logger.warning("odd number of startup arguments %r, not starting", args)
        return

    controller = SessionController(console=console)
    try:
        controller.run(import_path=options.import_path, export_path=options.export_path)
    except EOFError:
        logger.warning("input closed, leaving session without exit export")
        raise typer.Exit(code=0) from None


if __name__ == "__main__":
    app()
