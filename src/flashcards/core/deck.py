"""
Ordered, term-keyed card collection.

This module implements the deck the session controller owns. Cards are stored
in a dict keyed by ``term``, which gives us two invariants for free:

- at most one card per distinct term,
- insertion order is preserved (the quiz walks cards in this order).

Every mutation goes through a :class:`CardDeck` method that looks the card up
by its term; callers never mutate a detached copy.

API
---
- ``add(term, definition)``: append a fresh card (wrong count 0).
- ``merge(term, definition, wrong_count)``: import rule, overwrite the
  definition of an existing term or append a new card.
- ``remove(term)``: delete by term.
- ``record_miss(term)``: bump a card's wrong count.
- ``hardest()``: the cards sharing the highest non-zero wrong count.
- ``reset_stats()``: zero every wrong count.
"""

from __future__ import annotations

from collections.abc import Iterator

from .contracts.card import Card


class CardDeck:
    """
    In-memory ordered collection of :class:`Card` objects.

    Attributes
    ----------
    _cards : dict[str, Card]
        Cards keyed by term, in insertion order.
    """

    __slots__ = ("_cards",)

    def __init__(self) -> None:
        self._cards: dict[str, Card] = {}

    # ------------------------------- Lookup ---------------------------------

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards.values())

    def __contains__(self, term: object) -> bool:
        return term in self._cards

    def get(self, term: str) -> Card | None:
        """Return the card for ``term``, or ``None``."""
        return self._cards.get(term)

    def has_definition(self, definition: str) -> bool:
        """Return True if any card already carries ``definition``."""
        return any(card.definition == definition for card in self._cards.values())

    def term_for_definition(self, definition: str) -> str | None:
        """Return the term of the first card whose definition is ``definition``."""
        for card in self._cards.values():
            if card.definition == definition:
                return card.term
        return None

    def cards(self) -> tuple[Card, ...]:
        """Return the cards in deck order (immutable tuple)."""
        return tuple(self._cards.values())

    # ------------------------------- Mutation -------------------------------

    def add(self, term: str, definition: str) -> Card:
        """
        Append a new card with a zero wrong count.

        Raises
        ------
        ValueError
            If ``term`` is already in the deck.
        """
        if term in self._cards:
            raise ValueError(f"duplicate term: {term!r}")
        card = Card(term=term, definition=definition)
        self._cards[term] = card
        return card

    def merge(self, term: str, definition: str, wrong_count: int = 0) -> Card:
        """
        Merge one imported record into the deck.

        An existing card only gets its definition overwritten; its wrong count
        is left alone. A new term is appended with ``wrong_count``.
        """
        card = self._cards.get(term)
        if card is not None:
            card.definition = definition
            return card
        card = Card(term=term, definition=definition, wrong_count=wrong_count)
        self._cards[term] = card
        return card

    def remove(self, term: str) -> bool:
        """Delete the card for ``term``; return False if there was none."""
        return self._cards.pop(term, None) is not None

    def record_miss(self, term: str) -> int:
        """Increment the wrong count of ``term`` and return the new value."""
        card = self._cards[term]
        card.wrong_count += 1
        return card.wrong_count

    def reset_stats(self) -> None:
        """Set every card's wrong count back to zero."""
        for card in self._cards.values():
            card.wrong_count = 0

    # ------------------------------- Stats ----------------------------------

    def hardest(self) -> tuple[list[Card], int]:
        """
        Return the cards with the highest wrong count, and that count.

        Returns
        -------
        tuple[list[Card], int]
            ``([], 0)`` when the deck is empty or nobody has an error yet;
            otherwise every card tied at the maximum, in deck order.
        """
        top = max((card.wrong_count for card in self._cards.values()), default=0)
        if top == 0:
            return [], 0
        return [card for card in self._cards.values() if card.wrong_count == top], top


__all__ = ["CardDeck"]
