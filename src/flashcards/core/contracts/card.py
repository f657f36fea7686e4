"""Card — a term/definition pair with a wrong-answer counter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Card(BaseModel):
    """One flashcard.

    ``term`` is the identity key inside a deck and never changes after
    creation; ``definition`` may be rewritten by an import merge and
    ``wrong_count`` by the quiz or a stats reset.
    """

    model_config = ConfigDict(validate_assignment=True)

    term: str
    definition: str
    wrong_count: int = Field(default=0, ge=0)


__all__ = ["Card"]
