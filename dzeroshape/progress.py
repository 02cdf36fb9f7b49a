"""Coloured single-line progress bar for long event loops."""

from __future__ import annotations

import sys

BAR_WIDTH = 50

_GREEN = "\033[1;32m"
_YELLOW = "\033[1;33m"
_RED = "\033[1;31m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


def progress_bar(current, total, done="=", remain="."):
    """Render the bar for ``current`` out of ``total`` items."""
    fraction = current / total if total > 0 else 1.0
    position = max(0, int(BAR_WIDTH * fraction))
    filled = min(position, BAR_WIDTH)
    cells = [_GREEN + done] * filled
    if position < BAR_WIDTH:
        cells.append(">")
        cells.extend([_RED + remain] * (BAR_WIDTH - position - 1))
    return (
        f"\r{_BLUE}[{''.join(cells)}{_BLUE}] {_YELLOW}{int(fraction * 100)}% "
        f"{_RESET}({current}/{total})"
    )


def print_progress(current, total, stream=None):
    """Write the bar to ``stream`` (standard output by default) and flush."""
    out = sys.stdout if stream is None else stream
    out.write(progress_bar(current, total))
    out.flush()