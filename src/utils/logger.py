"""
Structured console logger

One line per event plus an optional tree of key/value details:

    [14:23:45] SPIRAL    ✓ Spiral created
               ├─ canvas_id: 0
               └─ spiral_id: 1

Modules bind a category once at import time:

    log = get_category_logger(LogCategory.RENDER)
    log.debug("Spiral drawn", segments=361)

configure_logger() changes the shared instance in place, so loggers bound
before configuration pick up the new level/colors.
"""

import sys
from datetime import datetime
from typing import List, Optional, TextIO
from models.enums import LogLevel, LogCategory


# === ANSI COLORS ===
class Colors:
    """ANSI escape codes"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.CANVAS: Colors.BRIGHT_GREEN,
    LogCategory.SPIRAL: Colors.BRIGHT_CYAN,
    LogCategory.RENDER: Colors.MAGENTA,
    LogCategory.FPS: Colors.BRIGHT_YELLOW,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
    LogCategory.GENERAL: Colors.WHITE,
}

# (symbol, color) per level; order defines priority
LEVEL_STYLES = {
    LogLevel.DEBUG: ('·', Colors.DIM),
    LogLevel.INFO: ('✓', Colors.GREEN),
    LogLevel.WARN: ('⚠', Colors.YELLOW),
    LogLevel.ERROR: ('✗', Colors.RED),
}
LEVEL_PRIORITY = {level: i for i, level in enumerate(LEVEL_STYLES)}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


class Logger:
    """
    Compact structured logger

    Args:
        min_level: Events below this level are dropped
        use_colors: ANSI colors (disable when output isn't a terminal)
        stream: Output stream (default: sys.stdout at write time)
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def is_enabled(self, level: LogLevel) -> bool:
        return LEVEL_PRIORITY[level] >= LEVEL_PRIORITY[self.min_level]

    def _paint(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _headline(self, category: LogCategory, message: str, level: LogLevel) -> str:
        symbol, level_color = LEVEL_STYLES[level]
        timestamp = datetime.now().strftime('[%H:%M:%S]')
        category_name = self._paint(
            category.name.ljust(CATEGORY_WIDTH),
            CATEGORY_COLORS.get(category, Colors.WHITE),
        )
        return f"{timestamp} {category_name} {self._paint(symbol, level_color)} {self._paint(message, level_color)}"

    def _detail_lines(self, details: List[str]) -> List[str]:
        last = len(details) - 1
        return [
            f"{DETAIL_INDENT}{self._paint('└─' if i == last else '├─', Colors.DIM)} {detail}"
            for i, detail in enumerate(details)
        ]

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Write one event

        Args:
            category: Log category (CANVAS, RENDER, ...)
            message: Main message text
            level: DEBUG, INFO, WARN or ERROR
            details: Free-form detail strings, shown before kwargs
            **kwargs: Key/value details ("key: value")
        """
        if not self.is_enabled(level):
            return

        all_details = list(details or [])
        all_details.extend(f"{key}: {value}" for key, value in kwargs.items())

        lines = [self._headline(category, message, level)]
        lines.extend(self._detail_lines(all_details))

        out = self.stream or sys.stdout
        for line in lines:
            print(line, file=out)

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        """Logger with a default category"""
        return BoundLogger(self, category)


class BoundLogger:
    """Category-bound view of a Logger; `category=` overrides per call."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    @property
    def category(self) -> LogCategory:
        return self._category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        self._base.log(category or self._category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self._base, category)


# === Shared instance ===
_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """Update the shared logger in place (bound loggers keep working)"""
    _logger.min_level = min_level
    _logger.use_colors = use_colors
