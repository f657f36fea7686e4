"""Flashcards package bootstrap.

A single-user terminal trainer: keep a deck of term/definition cards, quiz
yourself, and move decks in and out of flat record files.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
