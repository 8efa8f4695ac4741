"""Fixed-width text progress bar redrawn in place with carriage returns."""

import sys

from toum_updater.core.constants import PROGRESS_BAR_WIDTH
from toum_updater.utils.symbols import ConsoleStyle


def percent_of(current: int, total: int) -> int:
    """Whole percentage of current/total, 0 when the total is unknown."""
    if total <= 0:
        return 0
    return min(100, current * 100 // total)


def render_bar(current: int, total: int, width: int = PROGRESS_BAR_WIDTH) -> str:
    """Return '[####      ]  40%' for the given byte counts."""
    percent = percent_of(current, total)
    filled = percent * width // 100
    bar = "#" * filled + " " * (width - filled)
    return f"[{bar}] {percent:3d}%"


class ProgressBar:

    def __init__(self, stream=None, width: int = PROGRESS_BAR_WIDTH, color: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.width = width
        self.color = color
        self.finished = False

    def update(self, current: int, total: int) -> None:
        self.stream.write("\r" + render_bar(current, total, self.width))
        self.stream.flush()

    def finish(self) -> None:
        """Draw the bar full, then move to the next line."""
        if self.finished:
            return
        line = "[" + "#" * self.width + "] 100%"
        if self.color:
            line = f"{ConsoleStyle.GREEN}{line}{ConsoleStyle.RESET}"
        self.stream.write("\r" + line + "\n")
        self.stream.flush()
        self.finished = True

    def abort(self) -> None:
        """End the line without claiming completion."""
        if self.finished:
            return
        self.stream.write("\n")
        self.stream.flush()
        self.finished = True
