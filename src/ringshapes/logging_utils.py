"""
logging_utils.py
----------------

Console and rotating-file logging for gallery runs.

Records are tagged with the emitting shape module (``tech``, ``gear``, ...)
rather than the full dotted logger name, so clamping and degenerate-geometry
warnings can be traced back to the shape that produced them.
"""

__all__ = ["configure_logging", "ColorFormatter", "short_name"]

import os
import sys
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, init as colorama_init

PathLike = Union[str, os.PathLike]

ROOT_LOGGER = "ringshapes"
FILE_FMT = "[%(asctime)s] [%(levelname)-7s] [%(module_tag)-9s] %(message)s"
CONSOLE_FMT = "[%(asctime)s] [%(level_tag)s] [%(module_tag)-9s] %(message)s"
DATE_FMT = "%H:%M:%S"

LEVEL_COLORS = {
    logging.DEBUG:    Style.DIM,
    logging.INFO:     Fore.GREEN,
    logging.WARNING:  Fore.YELLOW,
    logging.ERROR:    Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}


def short_name(logger_name: str) -> str:
    """``ringshapes.tech`` -> ``tech``; the package logger itself -> ``main``."""
    if logger_name == ROOT_LOGGER:
        return "main"
    prefix = ROOT_LOGGER + "."
    if logger_name.startswith(prefix):
        return logger_name[len(prefix):]
    return logger_name


class _ModuleTagFilter(logging.Filter):
    """Adds ``record.module_tag`` for the file formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.module_tag = short_name(record.name)
        return True


class ColorFormatter(logging.Formatter):
    """Console formatter: short module tag plus a level name colored by severity.

    With ``use_color=False`` the ANSI codes are left out, which keeps
    redirected output and captured logs readable.
    """

    def __init__(self, fmt: str = CONSOLE_FMT, datefmt: str = DATE_FMT,
                 use_color: bool = True):
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        record.module_tag = short_name(record.name)
        level = f"{record.levelname:<7s}"
        if self.use_color:
            color = LEVEL_COLORS.get(record.levelno, "")
            level = f"{color}{level}{Style.RESET_ALL}"
        record.level_tag = level
        return super().format(record)


def configure_logging(level: int = logging.INFO,
                      log_dir: Optional[PathLike] = "logs",
                      name: str = ROOT_LOGGER,
                      run_prefix: str = "run",
                      color: Optional[bool] = None) -> Optional[Path]:
    """Configure console logging plus an optional rotating log file.

    Existing handlers on the named logger are replaced, so repeated calls do
    not duplicate output.

    Args:
        level: Logger level.
        log_dir: Directory for the rotating log file. ``None`` disables the
            file handler.
        name: Logger name to configure.
        run_prefix: Log file name prefix.
        color: Force ANSI colors on or off. ``None`` colors only when stderr
            is a terminal.

    Returns:
        Path of the log file, or ``None`` if file logging is disabled.
    """
    if color is None:
        color = sys.stderr.isatty()
    if color:
        colorama_init(strip=False, convert=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(use_color=color))
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y-%m-%d_%H%M%S")
        log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"
        fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5)
        fh.addFilter(_ModuleTagFilter())
        fh.setFormatter(logging.Formatter(FILE_FMT, DATE_FMT))
        logger.addHandler(fh)

    logger.info(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
