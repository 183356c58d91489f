"""Parse vocabulary lines of the form `term / body ;comment / body /`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .models import Entry, Phrase

logger = logging.getLogger(__name__)

TERM_SEPARATOR = " /"
PHRASE_SEPARATOR = "/"
COMMENT_MARKER = ";"


def parse_entry(line: str) -> Entry | None:
    """Parse one line into an entry.

    Empty lines and lines starting with `;` yield None. Only phrases closed by
    a `/` are emitted; trailing unclosed text is dropped.
    """
    line = line.rstrip("\r\n")
    if not line or line.startswith(COMMENT_MARKER):
        return None

    term, separator, rest = line.partition(TERM_SEPARATOR)
    if not separator:
        return Entry(term=line)

    phrases: list[Phrase] = []
    body: list[str] = []
    comment: list[str] = []
    in_comment = False
    for char in rest:
        if char == PHRASE_SEPARATOR:
            phrases.append(Phrase(body="".join(body), comment="".join(comment)))
            body.clear()
            comment.clear()
            in_comment = False
        elif char == COMMENT_MARKER and not in_comment:
            in_comment = True
        elif in_comment:
            comment.append(char)
        else:
            body.append(char)
    return Entry(term=term, phrases=tuple(phrases))


def load_entries(lines: Iterable[str]) -> tuple[Entry, ...]:
    """Parse every line of a stream, skipping lines without a usable term."""
    entries: list[Entry] = []
    skipped = 0
    for line in lines:
        entry = parse_entry(line)
        if entry is None or not entry.term:
            skipped += 1
            continue
        entries.append(entry)
    logger.debug("Loaded %d entries (%d lines skipped).", len(entries), skipped)
    return tuple(entries)


def load_entries_from_file(path: Path | str) -> tuple[Entry, ...]:
    """Load entries from a UTF-8 text file."""
    with Path(path).open(encoding="utf-8-sig") as handle:
        return load_entries(handle)
