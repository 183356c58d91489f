"""Core vocabulary records shared by the parser, hints and quiz state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Phrase:
    """One sense of a term with an optional comment annotation."""

    body: str
    comment: str = ""


@dataclass(frozen=True)
class Entry:
    """A term plus its definitional phrases in source order."""

    term: str
    phrases: tuple[Phrase, ...] = ()


@dataclass(frozen=True)
class Question:
    """One quiz round; `entry` is the shared record, never a copy."""

    index: int
    entry: Entry

    @property
    def number(self) -> int:
        """1-based number shown on screen."""
        return self.index + 1
