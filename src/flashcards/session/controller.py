"""
Session Controller: the command loop and every menu handler.

The controller owns the three pieces of session state:

- the :class:`~flashcards.core.deck.CardDeck`,
- the :class:`~flashcards.core.transcript.Transcript`,
- the :class:`~flashcards.session.console.SessionIO` bound to that transcript.

There is a single state, "awaiting command". Each handler is a straight
prompt/read/validate/act sequence that returns to the loop; only ``exit``
leaves it.

Quiz order
----------
``ask`` walks the deck in insertion order starting from the first card. A
count larger than the deck is clamped to the deck size.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from flashcards.core.deck import CardDeck
from flashcards.core.records import read_records, write_records
from flashcards.core.settings import get_logger, load_settings
from flashcards.core.transcript import Transcript

from .commands import Command, menu_prompt
from .console import Reader, SessionIO

FILE_PROMPT = "File name:"

logger = get_logger("flashcards.session")


class SessionController:
    """
    Interactive flashcard session.

    Parameters
    ----------
    console : Console | None
        Rich console for output; defaults to plain stdout.
    reader : Callable[[], str] | None
        Line source for user input; defaults to the console's ``input``.
    encoding : str | None
        Encoding for record and log files; defaults to the configured
        ``file_encoding``.
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        reader: Reader | None = None,
        encoding: str | None = None,
    ) -> None:
        self.deck = CardDeck()
        self.transcript = Transcript()
        self.io = SessionIO(self.transcript, console=console, reader=reader)
        self.encoding = encoding if encoding is not None else load_settings().file_encoding
        self._handlers: dict[Command, Callable[[], None]] = {
            Command.TRY_AGAIN: self.try_again,
            Command.ADD: self.add_card,
            Command.REMOVE: self.remove_card,
            Command.IMPORT: self.import_cards,
            Command.EXPORT: self.export_cards,
            Command.ASK: self.ask,
            Command.LOG: self.save_log,
            Command.HARDEST: self.hardest_card,
            Command.RESET: self.reset_stats,
        }

    # ------------------------------- Loop -----------------------------------

    def run(self, import_path: str = "", export_path: str = "") -> None:
        """Run the command loop until the user chooses ``exit``.

        Parameters
        ----------
        import_path : str
            Loaded before the first menu when non-blank.
        export_path : str
            Exported to on ``exit`` when non-blank.
        """
        if import_path.strip():
            self.import_cards(import_path)

        while True:
            command = Command.parse(self.io.ask(menu_prompt()))
            if command is Command.EXIT:
                if export_path:
                    self.export_cards(export_path)
                self.io.say("Bye bye!")
                return
            self._handlers[command]()

    def try_again(self) -> None:
        self.io.say(Command.TRY_AGAIN.value)

    # ------------------------------- Cards ----------------------------------

    def add_card(self) -> None:
        """Ask for a term and a definition and append the pair.

        Each value is asked once; an empty or already used value aborts the
        whole add with a message.
        """
        term = self.io.ask("The card:")
        if not term or term in self.deck:
            self.io.say(f'The card "{term}" already exists.')
            return

        definition = self.io.ask("The definition of the card:")
        if not definition or self.deck.has_definition(definition):
            self.io.say(f'The definition "{definition}" already exists.')
            return

        self.deck.add(term, definition)
        logger.info("added card %r (%d in deck)", term, len(self.deck))
        self.io.say(f'The pair ("{term}":"{definition}") has been added')

    def remove_card(self) -> None:
        term = self.io.ask("Which card?")
        if self.deck.remove(term):
            logger.info("removed card %r (%d in deck)", term, len(self.deck))
            self.io.say("The card has been removed.")
        else:
            self.io.say(f'Can\'t remove "{term}": there is no such card.')

    # ------------------------------- Files ----------------------------------

    def import_cards(self, path: str | None = None) -> None:
        """Merge every well-formed record of a file into the deck.

        Prompts for the path when ``path`` is None. The reported count is the
        number of matching lines, not the change in deck size.
        """
        if path is None:
            path = self.io.ask(FILE_PROMPT)
        try:
            records = read_records(path, encoding=self.encoding)
        except FileNotFoundError:
            logger.info("import skipped, no such file: %r", path)
            self.io.say("File not found.")
            return

        for record in records:
            self.deck.merge(record.term, record.definition, record.wrong_count)
        logger.info("imported %d records from %s", len(records), path)
        self.io.say(f"{len(records)} cards have been loaded.")

    def export_cards(self, path: str | None = None) -> None:
        """Write the deck to a file; a blank path does nothing."""
        if path is None:
            path = self.io.ask(FILE_PROMPT)
        if not path.strip():
            return

        count = write_records(path, self.deck, encoding=self.encoding)
        logger.info("exported %d records to %s", count, path)
        self.io.say(f"{count} cards have been saved.")

    def save_log(self) -> None:
        """Write the transcript so far, including this prompt and answer."""
        path = self.io.ask(FILE_PROMPT)
        if not path.strip():
            return

        saved = self.transcript.save(Path(path), encoding=self.encoding)
        logger.info("transcript saved to %s (%d lines)", saved, len(self.transcript))
        self.io.say("The log has been saved.")

    # ------------------------------- Quiz -----------------------------------

    def ask(self) -> None:
        """Ask for a count, then quiz that many cards in deck order."""
        count = self._read_count()
        if count > len(self.deck):
            logger.warning("asked for %d cards, deck has %d", count, len(self.deck))
            count = len(self.deck)

        for card in self.deck.cards()[:count]:
            answer = self.io.ask(f'Print the definition of "{card.term}":')
            self.check_answer(card.term, answer)

    def _read_count(self) -> int:
        while True:
            raw = self.io.ask("How many times to ask?")
            if raw.isascii() and raw.isdigit():
                return int(raw)
            self.io.say("not a number!")

    def check_answer(self, term: str, answer: str) -> bool:
        """Grade ``answer`` for the card ``term``; return True if it is right.

        A wrong answer bumps that card's wrong count and, when the answer is
        the definition of another card, names that card.
        """
        card = self.deck.get(term)
        if card is None:
            raise KeyError(term)
        if answer == card.definition:
            self.io.say("Correct!")
            return True

        self.deck.record_miss(term)
        other = self.deck.term_for_definition(answer)
        if other is None:
            self.io.say(f'Wrong. The right answer is "{card.definition}".')
        else:
            self.io.say(
                f'Wrong. The right answer is "{card.definition}", '
                f'but your definition is correct for "{other}"'
            )
        return False

    # ------------------------------- Stats ----------------------------------

    def hardest_card(self) -> None:
        cards, errors = self.deck.hardest()
        if not cards:
            self.io.say("There are no cards with errors.")
        elif len(cards) == 1:
            self.io.say(
                f'The hardest card is "{cards[0].term}". You have {errors} errors answering it'
            )
        else:
            terms = ", ".join(f'"{card.term}"' for card in cards)
            self.io.say(f"The hardest cards are {terms}. You have {errors} errors answering them.")

    def reset_stats(self) -> None:
        self.deck.reset_stats()
        self.io.say("Card statistics have been reset.")


__all__ = ["SessionController", "FILE_PROMPT"]
