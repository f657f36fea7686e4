"""Core package initializer for Flashcards.

Holds the data model, the deck, the record codec, the transcript buffer and the
settings conveniences:
    from flashcards.core.settings import load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
