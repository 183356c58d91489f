"""prompt_toolkit front end for the quiz session."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import create_input
from prompt_toolkit.layout.processors import Processor, Transformation, TransformationInput
from prompt_toolkit.styles import Style

from .hints import QuestionHint
from .models import Question
from .service import QuizState
from .session import InputChannelError, Quit, UserEvent, classify_input

PROMPT = "> "
Fragments = list[tuple[str, str]]
PrintFn = Callable[[FormattedText], None]

QUIZ_STYLE = Style.from_dict(
    {
        "question-number": "bold fg:ansibrightyellow",
        "phrase": "bold fg:ansibrightblue",
        "comment": "fg:ansibrightblack",
        "hint": "fg:ansibrightblack",
        "perfect": "fg:ansibrightgreen",
        "mistakes": "fg:ansibrightred",
    }
)


class PromptLike(Protocol):
    def prompt(self, message: str, **kwargs: Any) -> str: ...


class HintProcessor(Processor):
    """Append the live hint after the typed text on every redraw."""

    def __init__(self, hint: QuestionHint) -> None:
        self.hint = hint

    def apply_transformation(self, transformation_input: TransformationInput) -> Transformation:
        document = transformation_input.document
        fragments = list(transformation_input.fragments)
        if transformation_input.lineno == document.line_count - 1 and document.is_cursor_at_the_end:
            suggestion = self.hint(document.text)
            if suggestion:
                fragments.append(("class:hint", suggestion))
        return Transformation(fragments=fragments)


def question_fragments(question: Question) -> Fragments:
    """Render `Q<n> /body/body;comment/`."""
    fragments: Fragments = [("class:question-number", f"Q{question.number}"), ("", " ")]
    for phrase in question.entry.phrases:
        fragments.append(("", "/"))
        fragments.append(("class:phrase", phrase.body))
        if phrase.comment:
            fragments.append(("class:comment", f";{phrase.comment}"))
    fragments.append(("", "/"))
    return fragments


def result_fragments(question: Question, state: QuizState) -> Fragments:
    """Render the feedback line shown after a correct answer."""
    score = state.get_score(question.entry.term)
    if score is None:
        score = state.policy.initial()
    details = state.policy.describe(score)
    if state.mistakes == 0:
        style, label = "class:perfect", "perfect"
    else:
        noun = "mistake" if state.mistakes == 1 else "mistakes"
        style, label = "class:mistakes", f"{state.mistakes} {noun}"
    return [("", f"{PROMPT}{question.entry.term} "), (style, f"({label}, {details})")]


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def _default_print(text: FormattedText) -> None:
    print_formatted_text(text, style=QUIZ_STYLE)


class TerminalUI:
    """Line-oriented terminal UI with inline hints."""

    def __init__(self, session: PromptLike | None = None, print_fn: PrintFn = _default_print) -> None:
        if session is None:
            # Entries may arrive on a pipe; answers still come from the terminal.
            try:
                session = PromptSession(input=create_input(always_prefer_tty=True), erase_when_done=True)
            except Exception as exc:
                raise InputChannelError(_describe(exc)) from exc
        self.session = session
        self.print_fn = print_fn

    def notify_question(self, question: Question, state: QuizState) -> None:
        self.print_fn(FormattedText(question_fragments(question)))

    def notify_correct(self, question: Question, state: QuizState) -> None:
        self.print_fn(FormattedText(result_fragments(question, state)))

    def notify_incorrect(self, question: Question, state: QuizState) -> None:
        # The erased prompt is simply shown again with one more letter revealed.
        pass

    def wait_for_input(self, hint: QuestionHint) -> UserEvent:
        try:
            text = self.session.prompt(PROMPT, input_processors=[HintProcessor(hint)], style=QUIZ_STYLE)
        except (KeyboardInterrupt, EOFError):
            return Quit()
        except Exception as exc:
            raise InputChannelError(_describe(exc)) from exc
        return classify_input(text)
