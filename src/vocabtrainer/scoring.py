"""Score aggregation policies applied when a question is answered correctly.

Two policies are supported:

- ``counter`` keeps a pair of counters. A first-try answer bumps ``correct``;
  an answer reached after one or more mistakes bumps ``incorrect``.
- ``signed`` keeps a single integer that moves up on first-try answers and
  down otherwise.

Wrong submissions never touch the mapping directly; the mistake count of the
current question decides which branch the eventual correct answer takes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

ScoreT = TypeVar("ScoreT")


@dataclass(frozen=True)
class Score:
    """Counter pair for one term."""

    correct: int = 0
    incorrect: int = 0

    def increment_correct(self) -> Score:
        return Score(correct=self.correct + 1, incorrect=self.incorrect)

    def increment_incorrect(self) -> Score:
        return Score(correct=self.correct, incorrect=self.incorrect + 1)

    @property
    def total_tries(self) -> int:
        return self.correct + self.incorrect

    @property
    def correct_rate(self) -> float:
        """Share of first-try answers; 1.0 before any tries."""
        tries = self.total_tries
        if tries == 0:
            return 1.0
        return self.correct / tries


class ScoringPolicy(Protocol[ScoreT]):
    """Strategy interface for score aggregation and persistence layout."""

    name: str

    def initial(self) -> ScoreT: ...

    def apply(self, previous: ScoreT | None, mistakes: int) -> ScoreT: ...

    def to_fields(self, value: ScoreT) -> list[str]: ...

    def from_fields(self, fields: Sequence[str]) -> ScoreT: ...

    def describe(self, value: ScoreT) -> str: ...


class CounterPolicy:
    """Correct/incorrect counter pair."""

    name = "counter"

    def initial(self) -> Score:
        return Score()

    def apply(self, previous: Score | None, mistakes: int) -> Score:
        base = previous if previous is not None else self.initial()
        if mistakes == 0:
            return base.increment_correct()
        return base.increment_incorrect()

    def to_fields(self, value: Score) -> list[str]:
        return [str(value.correct), str(value.incorrect)]

    def from_fields(self, fields: Sequence[str]) -> Score:
        return Score(
            correct=max(0, _parse_int(fields, 0)),
            incorrect=max(0, _parse_int(fields, 1)),
        )

    def describe(self, value: Score) -> str:
        percent = round(value.correct_rate * 100)
        return f"{ordinal(value.total_tries)} try, {percent}% correct"


class SignedPolicy:
    """Single signed counter."""

    name = "signed"

    def initial(self) -> int:
        return 0

    def apply(self, previous: int | None, mistakes: int) -> int:
        base = previous if previous is not None else self.initial()
        return base + 1 if mistakes == 0 else base - 1

    def to_fields(self, value: int) -> list[str]:
        return [str(value)]

    def from_fields(self, fields: Sequence[str]) -> int:
        return _parse_int(fields, 0)

    def describe(self, value: int) -> str:
        return f"score {value:+d}"


DEFAULT_POLICY = CounterPolicy.name
_POLICIES: dict[str, Callable[[], ScoringPolicy[Any]]] = {
    CounterPolicy.name: CounterPolicy,
    SignedPolicy.name: SignedPolicy,
}
POLICY_NAMES = tuple(_POLICIES)


def get_policy(name: str) -> ScoringPolicy[Any]:
    """Return a policy instance by name."""
    try:
        return _POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unknown scoring policy '{name}'. Choose from: {', '.join(POLICY_NAMES)}.") from None


def ordinal(value: int) -> str:
    """Render an English ordinal such as 1st, 12th or 23rd."""
    if 10 <= value % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")
    return f"{value}{suffix}"


def _parse_int(fields: Sequence[str], index: int) -> int:
    """Parse one numeric field, defaulting to zero when missing or invalid."""
    if index >= len(fields):
        return 0
    try:
        return int(fields[index].strip())
    except ValueError:
        return 0
