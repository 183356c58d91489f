"""CLI entrypoint for the vocabulary drill."""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, TextIO

from . import __version__
from .content_loader import load_entries, load_entries_from_file
from .models import Entry
from .progress import ScoreStore, default_score_path
from .scoring import DEFAULT_POLICY, POLICY_NAMES, get_policy
from .service import QuizState
from .session import InputChannelError, QuizUI, run_session
from .terminal import TerminalUI

PrintFn = Callable[[str], None]
UIFactory = Callable[[], QuizUI]
STDIN_SOURCE = "-"

logger = logging.getLogger(__name__)


def _terminal_ui() -> QuizUI:
    """Create the interactive terminal UI."""
    return TerminalUI()


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(prog="vocabtrainer", description="Vocabulary drill with progressive hints")
    parser.add_argument(
        "source",
        nargs="?",
        default=STDIN_SOURCE,
        help="entry file, one `term / phrase /` record per line (default: stdin)",
    )
    parser.add_argument("--scores", type=Path, default=None, help="score file (default: XDG config dir)")
    parser.add_argument("--policy", choices=POLICY_NAMES, default=DEFAULT_POLICY, help="scoring policy")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _read_stdin_entries() -> tuple[Entry, ...]:
    """Read entries from the process stdin as UTF-8 regardless of locale."""
    wrapper = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8-sig")
    try:
        return load_entries(wrapper)
    finally:
        # Leave sys.stdin usable for the terminal UI.
        wrapper.detach()


def _read_entries(source: str, stdin: TextIO | None) -> tuple[Entry, ...]:
    if source != STDIN_SOURCE:
        return load_entries_from_file(source)
    if stdin is not None:
        return load_entries(stdin)
    return _read_stdin_entries()


def run(
    argv: Sequence[str] | None = None,
    *,
    ui_factory: UIFactory = _terminal_ui,
    print_fn: PrintFn = print,
    stdin: TextIO | None = None,
) -> int:
    """Run one drill session and persist scores; return the exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    policy = get_policy(args.policy)
    score_path: Path = args.scores if args.scores is not None else default_score_path()
    store = ScoreStore(score_path, policy)
    try:
        entries = _read_entries(args.source, stdin)
        scores: dict[str, Any] = store.load()
    except (OSError, UnicodeDecodeError) as exc:
        print_fn(f"Error: {exc}")
        return 1

    if not entries:
        print_fn("No entries to practice.")
        return 0

    state = QuizState(entries, scores, policy)
    exit_code = 0
    try:
        ui = ui_factory()
        summary = run_session(state, ui)
    except InputChannelError as exc:
        print_fn(f"Input error: {exc}")
        exit_code = 1
    else:
        logger.debug("Answered %d/%d questions.", summary.answered, summary.total)
        if summary.quit_early:
            print_fn(f"Stopped after {summary.answered}/{summary.total} questions.")

    try:
        store.save(state.scores)
    except OSError as exc:
        print_fn(f"Error: could not save scores: {exc}")
        return 1
    return exit_code


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
