"""Session loop driving the quiz state against an abstract input boundary."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from .hints import QuestionHint
from .models import Question
from .service import QuizState

logger = logging.getLogger(__name__)

COMMAND_PREFIX = ":"
QUIT_COMMAND = "quit"


class InputChannelError(Exception):
    """The input channel failed for a reason other than interrupt or end-of-input."""


@dataclass(frozen=True)
class Submitted:
    """An answer attempt typed by the user."""

    text: str


@dataclass(frozen=True)
class Quit:
    """The user asked to end the session."""


UserEvent = Submitted | Quit


class QuizUI(Protocol):
    """Interaction surface the session loop needs."""

    def notify_question(self, question: Question, state: QuizState) -> None: ...

    def notify_correct(self, question: Question, state: QuizState) -> None: ...

    def notify_incorrect(self, question: Question, state: QuizState) -> None: ...

    def wait_for_input(self, hint: QuestionHint) -> UserEvent:
        """Block for one line; raise InputChannelError if the channel breaks."""
        ...


@dataclass(frozen=True)
class SessionSummary:
    """Outcome of one session."""

    answered: int
    total: int
    quit_early: bool


def classify_input(text: str) -> UserEvent:
    """Turn a raw input line into a user event.

    `:` followed by any leading part of `quit` (including nothing) ends the
    session. Every other line, prefixed or not, is an answer attempt.
    """
    if text.startswith(COMMAND_PREFIX):
        command = text[len(COMMAND_PREFIX) :]
        if QUIT_COMMAND.startswith(command):
            return Quit()
    return Submitted(text)


def run_session(state: QuizState, ui: QuizUI) -> SessionSummary:
    """Ask every remaining question until the list is exhausted or the user quits.

    InputChannelError from the UI propagates; answered progress stays in `state`.
    """
    answered = 0
    while (question := state.next_question()) is not None:
        ui.notify_question(question, state)
        while True:
            event = ui.wait_for_input(QuestionHint(entry=question.entry, mistakes=state.mistakes))
            if isinstance(event, Quit):
                logger.debug("Quit requested at question %d.", question.number)
                return SessionSummary(answered=answered, total=len(state.entries), quit_early=True)
            if state.answer_question(question, event.text):
                ui.notify_correct(question, state)
                answered += 1
                break
            ui.notify_incorrect(question, state)
    return SessionSummary(answered=answered, total=len(state.entries), quit_early=False)
