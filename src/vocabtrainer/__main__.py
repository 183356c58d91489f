"""Allow `python -m vocabtrainer [source] [options]`."""

from __future__ import annotations

import sys

from .main import run


def main() -> int:
    """Run the trainer with the process arguments and return its exit code."""
    return run(sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
