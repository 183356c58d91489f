from vocabtrainer.hints import QuestionHint, hint_for, mask_term
from vocabtrainer.models import Entry


def test_no_mistakes_reveals_only_structure() -> None:
    assert mask_term("ice-cream cone", 0) == "___-_____ ____"


def test_mistakes_reveal_letters_in_order() -> None:
    assert mask_term("ice-cream", 1) == "i__-_____"
    assert mask_term("ice-cream", 3) == "ice-_____"
    assert mask_term("ice-cream", 4) == "ice-c____"


def test_reveal_budget_saturates_at_full_term() -> None:
    assert mask_term("cat", 10) == "cat"


def test_non_ascii_letters_are_always_shown() -> None:
    assert mask_term("café", 0) == "___é"


def test_more_mistakes_never_remask() -> None:
    term = "a b-cd, ef"
    previous = mask_term(term, 0)
    for mistakes in range(1, len(term) + 2):
        current = mask_term(term, mistakes)
        for before, after in zip(previous, current, strict=True):
            if before != "_":
                assert after == before
        previous = current


def test_hint_skips_typed_prefix() -> None:
    assert hint_for("hello", 2, "") == "he___"
    assert hint_for("hello", 2, "h") == "e___"
    assert hint_for("hello", 2, "hxl") == "__"
    assert hint_for("hello", 2, "hello world") == ""


def test_question_hint_is_callable_on_buffer() -> None:
    hint = QuestionHint(entry=Entry(term="good day"), mistakes=1)
    assert hint("") == "g___ ___"
    assert hint("go") == "__ ___"
