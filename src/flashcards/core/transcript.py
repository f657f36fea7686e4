"""
Session transcript buffer.

The transcript captures every line shown to the user and every line the user
typed, interleaved in chronological order, for the lifetime of one session.
It lives in memory and only reaches disk through :meth:`Transcript.save`
(the ``log`` command); otherwise it is discarded when the process exits.

Each recorded entry is stored with its trailing line break, so ``text()`` is
exactly what a terminal would have shown.
"""

from __future__ import annotations

from pathlib import Path


class Transcript:
    """Growing, append-only text buffer of one session's dialogue."""

    __slots__ = ("_lines",)

    def __init__(self) -> None:
        self._lines: list[str] = []

    def record_output(self, line: str) -> None:
        """Append a line that was printed to the user."""
        self._lines.append(f"{line}\n")

    def record_input(self, line: str) -> None:
        """Append a line the user typed."""
        self._lines.append(f"{line}\n")

    def text(self) -> str:
        """Return the full transcript as one string."""
        return "".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def save(self, path: str | Path, *, encoding: str = "utf-8") -> Path:
        """Overwrite ``path`` with the current transcript and return the path."""
        target = Path(path)
        with target.open("w", encoding=encoding) as f:
            f.write(self.text())
        return target


__all__ = ["Transcript"]
