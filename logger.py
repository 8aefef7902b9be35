#!/usr/bin/env python3
"""
Logging utilities for Tagger
Provides colored console logging and file logging capabilities.
"""

import logging
from pathlib import Path
from typing import Optional


# ANSI color codes for terminal output
class Colors:
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to log levels"""
    COLORS = {
        'DEBUG': Colors.BLUE,
        'INFO': Colors.GREEN,
        'WARNING': Colors.YELLOW,
        'ERROR': Colors.RED,
        'CRITICAL': Colors.RED + Colors.BOLD
    }

    def format(self, record):
        # Color a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, Colors.RESET)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        return super().format(record)


def setup_logging(log_file: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """
    Setup colored logging with an optional file handler

    The 'Tagger' logger is also attached to the root logger, so module loggers
    from getLogger(__name__) end up in the same handlers.

    Args:
        log_file: Path to the log file, or None for console only
        verbose: If True, enable DEBUG level logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger('Tagger')
    logger.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)

    # Clear handlers from a previous setup
    for handler in [h for h in root.handlers if getattr(h, '_tagger', False)]:
        root.removeHandler(handler)
        handler.close()

    # Console handler with colored output
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter('%(levelname)s: %(name)s: %(message)s'))
    console_handler._tagger = True
    root.addHandler(console_handler)

    # File handler with detailed formatting (no ANSI colors)
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        file_handler._tagger = True
        root.addHandler(file_handler)

    return logger
