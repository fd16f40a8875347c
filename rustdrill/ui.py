"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os
import sys

_RED = "31"
_GREEN = "32"


def _style(text: str, *codes: str) -> str:
    """Wrap text in ANSI codes when standard output is a terminal."""
    isatty = getattr(sys.stdout, "isatty", None)
    if not codes or isatty is None or not isatty():
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def warn(message: str) -> None:
    """Print a warning line in red."""
    mark = "!" if no_emoji() else "⚠️ "
    print(_style(mark, _RED), _style(message, _RED))


def success(message: str) -> None:
    """Print a success line in green."""
    mark = "✓" if no_emoji() else "✅"
    print(_style(mark, _GREEN), _style(message, _GREEN))