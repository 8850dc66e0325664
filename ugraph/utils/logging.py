"""Logging setup for ugraph.

Provides a package logger with colored console output and optional file output.
The default level can be set with the ``UGRAPH_LOG_LEVEL`` environment variable.
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional


class Colors:
    """ANSI escape codes for colored terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[31m"
    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name in console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.BRIGHT_BLACK,
        logging.INFO: Colors.BRIGHT_BLUE,
        logging.WARNING: Colors.BRIGHT_YELLOW,
        logging.ERROR: Colors.BRIGHT_RED,
        logging.CRITICAL: Colors.RED + Colors.BOLD,
    }

    def __init__(self, fmt: str = None, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors and self._supports_color()

    @staticmethod
    def _supports_color() -> bool:
        """Check if stdout is a terminal that can render ANSI colors."""
        if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
            return False

        if sys.platform == "win32":
            try:
                import colorama
                colorama.init()
                return True
            except ImportError:
                return False

        return True

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors:
            # Color a copy so file handlers sharing the record stay plain
            record = logging.makeLogRecord(record.__dict__)
            color = self.LEVEL_COLORS.get(record.levelno, "")
            record.levelname = f"{color}{record.levelname}{Colors.RESET}"

        return super().format(record)


def _to_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper())
    return level


def setup_logger(
    name: str = "ugraph",
    level: str | int = logging.INFO,
    log_file: Optional[str | Path] = None,
    console: bool = True,
    use_colors: bool = True,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """Setup a logger with console and/or file output.

    Args:
        name: Logger name.
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional file path for logging to file.
        console: Whether to log to console.
        use_colors: Whether to use colored output in console.
        format_string: Custom format string. If None, uses default.

    Returns:
        logging.Logger: Configured logger instance.

    Example:
        >>> logger = setup_logger("ugraph.loader", level="DEBUG")
        >>> logger.debug("Reading edges")
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    level = _to_level(level)
    logger.setLevel(level)

    if format_string is None:
        format_string = "[%(name)s] [%(levelname)s] %(message)s"

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        if use_colors:
            console_formatter = ColoredFormatter(format_string)
        else:
            console_formatter = logging.Formatter(format_string)

        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_logger(
    name: str = "ugraph",
    level: Optional[str | int] = None,
) -> logging.Logger:
    """Get or create a logger.

    If the logger has no handlers yet, it is set up with default settings.

    Args:
        name: Logger name.
        level: Optional logging level. If None, uses existing level or INFO.

    Returns:
        logging.Logger: Logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        setup_logger(name, level=level or logging.INFO)
    elif level is not None:
        logger.setLevel(_to_level(level))

    return logger


def set_log_level(level: str | int, name: str = "ugraph") -> None:
    """Set logging level for an existing logger and all its handlers."""
    logger = logging.getLogger(name)
    level = _to_level(level)

    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def disable_logging(name: str = "ugraph") -> None:
    """Silence the given logger."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.CRITICAL + 1)


def enable_logging(name: str = "ugraph", level: str | int = logging.INFO) -> None:
    """Re-enable a logger silenced by :func:`disable_logging`."""
    set_log_level(level, name)


_default_logger = None


def init_default_logger(
    level: str | int = None,
    log_file: Optional[str | Path] = None,
) -> logging.Logger:
    """Initialize the default ugraph logger.

    Args:
        level: Logging level. If None, uses UGRAPH_LOG_LEVEL or INFO.
        log_file: Optional log file path.

    Returns:
        logging.Logger: Initialized logger.
    """
    global _default_logger

    if level is None:
        level_str = os.environ.get("UGRAPH_LOG_LEVEL", "INFO")
        level = getattr(logging, level_str.upper(), logging.INFO)

    _default_logger = setup_logger(
        name="ugraph",
        level=level,
        log_file=log_file,
        console=True,
        use_colors=True,
    )

    return _default_logger


if _default_logger is None:
    init_default_logger()
