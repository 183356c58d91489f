from collections.abc import Iterable

import pytest

from vocabtrainer.hints import QuestionHint
from vocabtrainer.models import Entry, Question
from vocabtrainer.scoring import Score
from vocabtrainer.service import QuizState
from vocabtrainer.session import (
    InputChannelError,
    Quit,
    Submitted,
    UserEvent,
    classify_input,
    run_session,
)


class ScriptedUI:
    def __init__(self, events: Iterable[UserEvent | Exception]) -> None:
        self._events = iter(events)
        self.log: list[tuple[str, int]] = []
        self.hints: list[str] = []

    def notify_question(self, question: Question, state: QuizState) -> None:
        self.log.append(("question", question.number))

    def notify_correct(self, question: Question, state: QuizState) -> None:
        self.log.append(("correct", state.mistakes))

    def notify_incorrect(self, question: Question, state: QuizState) -> None:
        self.log.append(("incorrect", state.mistakes))

    def wait_for_input(self, hint: QuestionHint) -> UserEvent:
        self.hints.append(hint(""))
        event = next(self._events)
        if isinstance(event, Exception):
            raise event
        return event


@pytest.mark.parametrize("text", [":q", ":qu", ":quit", ":"])
def test_classify_quit_prefixes(text: str) -> None:
    assert classify_input(text) == Quit()


@pytest.mark.parametrize("text", [":x", ":quitter", ":Q", "quit", "q", "", " :q"])
def test_classify_other_input_is_answer(text: str) -> None:
    assert classify_input(text) == Submitted(text)


def test_session_scores_dog_then_cat(dog: Entry, cat: Entry) -> None:
    state = QuizState([dog, cat])
    ui = ScriptedUI([Submitted("dog"), Submitted("wrong"), Submitted("cat")])

    summary = run_session(state, ui)

    assert ui.log == [("question", 1), ("correct", 0), ("question", 2), ("incorrect", 1), ("correct", 1)]
    assert ui.hints == ["___", "___", "c__"]
    assert state.scores == {"dog": Score(correct=1, incorrect=0), "cat": Score(correct=0, incorrect=1)}
    assert summary.answered == 2
    assert summary.total == 2
    assert summary.quit_early is False
    assert state.finished is True


def test_quit_keeps_answered_progress(dog: Entry, cat: Entry) -> None:
    state = QuizState([dog, cat])
    ui = ScriptedUI([Submitted("dog"), Submitted("nope"), Quit()])

    summary = run_session(state, ui)

    assert summary.quit_early is True
    assert summary.answered == 1
    assert state.scores == {"dog": Score(correct=1, incorrect=0)}
    assert state.progress == 2


def test_input_error_propagates_after_partial_progress(dog: Entry, cat: Entry) -> None:
    state = QuizState([dog, cat])
    ui = ScriptedUI([Submitted("dog"), InputChannelError("terminal went away")])

    with pytest.raises(InputChannelError):
        run_session(state, ui)
    assert state.scores == {"dog": Score(correct=1, incorrect=0)}


def test_prefixed_non_quit_answer_is_checked_literally() -> None:
    entry = Entry(term=":)")
    state = QuizState([entry])
    ui = ScriptedUI([Submitted(":)")])

    summary = run_session(state, ui)

    assert summary.answered == 1
    assert state.get_score(":)") == Score(correct=1)


def test_empty_entry_list_finishes_without_prompting() -> None:
    ui = ScriptedUI([])
    summary = run_session(QuizState([]), ui)
    assert summary.total == 0
    assert ui.log == []
