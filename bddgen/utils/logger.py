"""Console logging setup"""
import logging
import sys
from typing import Dict, Union

from colorama import Fore, Style, init as colorama_init

colorama_init()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"

_loggers: Dict[str, logging.Logger] = {}
_level = logging.INFO


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name"""

    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, "")
        original = record.levelname
        record.levelname = f"{color}{original}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logger(name: str) -> logging.Logger:
    """Get a logger writing coloured output to stdout"""
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColoredFormatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(_level)
    logger.propagate = False

    _loggers[name] = logger
    return logger


def set_log_level(level: Union[str, int]) -> None:
    """Apply a level to every logger created through setup_logger"""
    global _level

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    _level = level
    for logger in _loggers.values():
        logger.setLevel(level)
