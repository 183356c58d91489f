"""Quiz progression state: questions, answers and score updates."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from typing import Any

from .models import Entry, Question
from .scoring import DEFAULT_POLICY, ScoringPolicy, get_policy


class QuizState:
    """Walks the entry list once, tracking mistakes for the active question.

    `progress` only grows, from 0 to `len(entries)`. `mistakes` resets whenever
    a new question is handed out.
    """

    def __init__(
        self,
        entries: Iterable[Entry],
        scores: MutableMapping[str, Any] | None = None,
        policy: ScoringPolicy[Any] | None = None,
    ) -> None:
        self.entries: tuple[Entry, ...] = tuple(entries)
        self.scores: MutableMapping[str, Any] = {} if scores is None else scores
        self.policy: ScoringPolicy[Any] = policy if policy is not None else get_policy(DEFAULT_POLICY)
        self.progress = 0
        self.mistakes = 0

    @property
    def finished(self) -> bool:
        return self.progress >= len(self.entries)

    def next_question(self) -> Question | None:
        """Return the next question, or None once every entry has been asked."""
        if self.finished:
            return None
        index = self.progress
        self.progress += 1
        self.mistakes = 0
        return Question(index=index, entry=self.entries[index])

    def answer_question(self, question: Question, answer: str) -> bool:
        """Check an answer by exact match and update scores when correct."""
        term = question.entry.term
        if answer != term:
            self.mistakes += 1
            return False
        self.scores[term] = self.policy.apply(self.scores.get(term), self.mistakes)
        return True

    def get_score(self, term: str) -> Any | None:
        """Return the aggregate score for a term, if any."""
        return self.scores.get(term)
