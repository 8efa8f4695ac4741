"""Leveled, colorized console log with a timestamped log file."""

import os
import sys
from datetime import datetime
from pathlib import Path

from toum_updater.utils.symbols import ConsoleStyle, LevelMarkers


class ConsoleLog:
    """Log callback shared by every component of an update run.

    Call it like the installer's other log callbacks::

        log("Copying game files...")
        log("Make sure your game has updated!", warning=True)
        log("Failed to unzip mod.", error=True)
    """

    def __init__(self, log_file=None, verbose=False, stream=None, error_stream=None, color=None):
        self.log_file = Path(log_file) if log_file else None
        self.verbose = verbose
        self.stream = stream if stream is not None else sys.stdout
        self.error_stream = error_stream if error_stream is not None else sys.stderr
        self.color = self._supports_color(self.stream) if color is None else color

    @staticmethod
    def _supports_color(stream):
        if os.environ.get("NO_COLOR"):
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def __call__(self, message, error=False, info=False, warning=False, debug=False, success=False, end="\n"):
        self.log(message, error=error, info=info, warning=warning, debug=debug, success=success, end=end)

    def log(self, message, error=False, info=False, warning=False, debug=False, success=False, end="\n"):
        """Write a message with its level marker.

        Args:
            message: Message to log
            error: Red [ERROR] marker, written to stderr
            info: Bold [INFO] marker (also the default when no level is set)
            warning: Yellow [WARN] marker
            debug: Gray [DEBUG] marker, only shown in verbose mode
            success: Green [DONE] marker
            end: Line terminator, "" keeps the cursor on the line for prompts
        """
        log_entry, marker, style = self._format_log_entry(
            message, error=error, warning=warning, debug=debug, success=success
        )
        self._write_log_to_file(log_entry)

        if debug and not self.verbose:
            return

        stream = self.error_stream if error else self.stream
        stream.write(f"{self.style(marker, style)}{message}{end}")
        stream.flush()

    def style(self, text, style):
        if not self.color or not style:
            return text
        return f"{style}{text}{ConsoleStyle.RESET}"

    def _format_log_entry(self, message, error=False, warning=False, debug=False, success=False):
        """Build the log file entry and the console marker for a level.

        Returns:
            tuple: (log_entry: str, marker: str, style: str)
        """
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        if error:
            prefix, marker, style = 'ERROR: ', LevelMarkers.ERROR, ConsoleStyle.RED
        elif warning:
            prefix, marker, style = 'WARN: ', LevelMarkers.WARN, ConsoleStyle.YELLOW
        elif debug:
            prefix, marker, style = 'DEBUG: ', LevelMarkers.DEBUG, ConsoleStyle.GRAY
        elif success:
            prefix, marker, style = 'DONE: ', LevelMarkers.DONE, ConsoleStyle.GREEN
        else:
            prefix, marker, style = 'INFO: ', LevelMarkers.INFO, ConsoleStyle.BOLD

        log_entry = f"[{timestamp}] {prefix}{message}\n"
        return (log_entry, marker, style)

    def _write_log_to_file(self, log_entry):
        """Append a log entry to the log file, never failing the run."""
        if not self.log_file:
            return
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(log_entry)
        except OSError:
            pass
