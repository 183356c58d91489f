"""Progressive answer hints revealed as mistakes accumulate."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Entry

MASK_CHAR = "_"


def _is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def mask_term(term: str, mistakes: int, mask: str = MASK_CHAR) -> str:
    """Mask letters of `term` beyond the first `mistakes` letters.

    Non-letters (spaces, punctuation, non-ASCII characters) are always shown
    and do not count toward the reveal budget.
    """
    symbols = 0
    chars: list[str] = []
    for index, char in enumerate(term):
        if not _is_ascii_letter(char):
            symbols += 1
            chars.append(char)
        elif index - symbols < mistakes:
            chars.append(char)
        else:
            chars.append(mask)
    return "".join(chars)


def hint_for(term: str, mistakes: int, typed: str) -> str:
    """Return the masked remainder of `term` after what has been typed."""
    return mask_term(term, mistakes)[len(typed) :]


@dataclass(frozen=True)
class QuestionHint:
    """Hint context for one prompt: the active entry and its mistake count."""

    entry: Entry
    mistakes: int

    def __call__(self, buffer: str) -> str:
        return hint_for(self.entry.term, self.mistakes, buffer)
