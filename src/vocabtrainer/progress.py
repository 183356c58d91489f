"""Tab-separated persistence for per-term scores."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .scoring import ScoringPolicy

logger = logging.getLogger(__name__)

APP_DIR_NAME = "vocab-trainer"
SCORE_FILE_NAME = "scores.txt"
FIELD_SEPARATOR = "\t"
UNSTORABLE_CHARS = (FIELD_SEPARATOR, "\n", "\r")


def default_config_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Resolve the per-user config directory.

    Order: ``$XDG_CONFIG_HOME``, then ``$HOME/.config``, then the system temp dir.
    """
    env = os.environ if environ is None else environ
    config_home = env.get("XDG_CONFIG_HOME")
    if config_home:
        base = Path(config_home)
    elif env.get("HOME"):
        base = Path(env["HOME"]) / ".config"
    else:
        base = Path(tempfile.gettempdir())
    return base / APP_DIR_NAME


def default_score_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the default score file location."""
    return default_config_dir(environ) / SCORE_FILE_NAME


class ScoreStore:
    """Read and write the score mapping for one scoring policy."""

    def __init__(self, path: Path | str, policy: ScoringPolicy[Any]) -> None:
        self.path = Path(path)
        self.policy = policy

    def load(self) -> dict[str, Any]:
        """Load all scores; a missing file yields an empty mapping."""
        scores: dict[str, Any] = {}
        if not self.path.exists():
            logger.debug("No score file at %s; starting fresh.", self.path)
            return scores
        with self.path.open(encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\r\n")
                if not line:
                    continue
                term, *fields = line.split(FIELD_SEPARATOR)
                scores[term] = self.policy.from_fields(fields)
        logger.debug("Loaded %d scores from %s.", len(scores), self.path)
        return scores

    def save(self, scores: Mapping[str, Any]) -> None:
        """Overwrite the score file with the full mapping.

        Terms containing the field separator or a line break cannot be stored
        and are skipped with a warning.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lines: list[str] = []
        for term, value in scores.items():
            if any(char in term for char in UNSTORABLE_CHARS):
                logger.warning("Not saving score for %r: term contains a tab or line break.", term)
                continue
            lines.append(FIELD_SEPARATOR.join([term, *self.policy.to_fields(value)]) + "\n")
        self.path.write_text("".join(lines), encoding="utf-8")
        logger.debug("Saved %d scores to %s.", len(lines), self.path)
