"""Record line codec and flat-file read/write for card decks.

Record grammar
--------------
One card per line::

    "<term>"="<definition>"<wrong_count>

Term and definition are raw text without escaping; ``wrong_count`` is an
optional run of decimal digits (absent means 0). Matching is anchored at both
ends and the quoted groups are greedy, so ``"a"="b"="c"`` reads as the term
``a"="b`` with the definition ``c``.

Lines that do not match are skipped by :func:`read_records`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from .contracts.card import Card

RECORD_PATTERN = re.compile(r'"(?P<term>.*)"="(?P<definition>.*)"(?P<wrong_count>\d*)')


def format_record(card: Card) -> str:
    """Render ``card`` as one record line (without the line break)."""
    return f'"{card.term}"="{card.definition}"{card.wrong_count}'


def parse_record(line: str) -> Card | None:
    """Parse one record line; return ``None`` if it does not match the grammar."""
    match = RECORD_PATTERN.fullmatch(line)
    if match is None:
        return None
    digits = match.group("wrong_count")
    return Card(
        term=match.group("term"),
        definition=match.group("definition"),
        wrong_count=int(digits) if digits else 0,
    )


def read_records(path: str | Path, *, encoding: str = "utf-8") -> list[Card]:
    """Read every well-formed record from ``path``.

    Parameters
    ----------
    path : str | Path
        File to read. A blank path or a directory counts as missing.
    encoding : str, default "utf-8"
        Text encoding of the file.

    Returns
    -------
    list[Card]
        Parsed records in file order; malformed lines are dropped.

    Raises
    ------
    FileNotFoundError
        If ``path`` is blank or not a regular file.
    """
    source = Path(path)
    if not str(path).strip() or not source.is_file():
        raise FileNotFoundError(str(path))

    cards: list[Card] = []
    with source.open("r", encoding=encoding) as f:
        for raw in f:
            card = parse_record(raw.rstrip("\n"))
            if card is not None:
                cards.append(card)
    return cards


def write_records(path: str | Path, cards: Iterable[Card], *, encoding: str = "utf-8") -> int:
    """Truncate ``path`` and write one record line per card; return the count."""
    count = 0
    with Path(path).open("w", encoding=encoding) as f:
        for card in cards:
            f.write(format_record(card))
            f.write("\n")
            count += 1
    return count


__all__ = ["RECORD_PATTERN", "format_record", "parse_record", "read_records", "write_records"]
