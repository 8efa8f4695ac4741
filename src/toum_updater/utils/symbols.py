"""Centralized symbols and console styles for consistent log output."""


class LogSymbols:
    """Unicode symbols for log messages and summaries."""
    
    SUCCESS = "✓"
    
    # List and formatting
    BULLET = "•"         # U+2022 - Bullet point for lists
    TRASH = "🗑"         # U+1F5D1 - Trash/delete indicator
    SAVE = "💾"          # U+1F4BE - Floppy disk (backup saved)
    ARROW_RIGHT = "→"    # U+2192 - Rightwards arrow (for "A → B" transitions)


class ConsoleStyle:
    """ANSI escape sequences for the level markers."""
    
    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;93m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


class LevelMarkers:
    """Level prefixes written in front of every console line."""
    
    INFO = "[INFO]: "
    WARN = "[WARN]: "
    ERROR = "[ERROR]: "
    DONE = "[DONE]: "
    DEBUG = "[DEBUG]: "
