from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from vocabtrainer.models import Entry, Phrase  # noqa: E402


@pytest.fixture
def dog() -> Entry:
    return Entry(term="dog", phrases=(Phrase(body=" an animal "),))


@pytest.fixture
def cat() -> Entry:
    return Entry(term="cat", phrases=(Phrase(body=" a feline "),))


@pytest.fixture
def score_path(tmp_path: Path) -> Path:
    return tmp_path / "config" / "vocab-trainer" / "scores.txt"
