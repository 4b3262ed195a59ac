"""
Logging setup for box-inspect.

The package logs under ``box_engine``; the library itself only attaches a
NullHandler, and ``setup_logging`` wires console and file output from the
``logging.*`` settings of a ``Config``.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "box_engine"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


def _level(name: Optional[str], fallback: int) -> int:
    """Resolve a level name such as "WARNING"; unknown names give ``fallback``."""
    value = logging.getLevelName(str(name).upper()) if name else None
    return value if isinstance(value, int) else fallback


class LogFormatter(logging.Formatter):
    """Console formatter that colors the level name of each record."""

    RESET = '\033[0m'
    LEVEL_COLORS = {
        logging.DEBUG: '\033[34m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[31m\033[1m',
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Args:
            colored: Whether to add ANSI colors, never on Windows consoles
        """
        super().__init__(*args, **kwargs)
        self.colored = colored and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.colored or color is None:
            return message
        return message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


def setup_logging(config=None, debug: bool = False,
                  component: Optional[str] = None) -> logging.Logger:
    """
    Attach console and file handlers to the package logger.

    Args:
        config: A ``Config``; its ``logging.console_level``,
            ``logging.file_level`` and ``logging.log_file`` are used, the
            defaults when omitted
        debug: Force console output down to DEBUG
        component: Configure ``box_engine.<component>`` instead of the root

    Returns:
        logging.Logger: The configured logger
    """
    get = config.get if config is not None else (lambda key, default=None: default)

    name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(name)

    # Called twice, e.g. by tests driving main() repeatedly
    if any(not isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        return logger

    console_level = logging.DEBUG if debug else _level(get("logging.console_level"), logging.WARNING)
    file_level = _level(get("logging.file_level"), logging.DEBUG)
    log_file = get("logging.log_file")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(LogFormatter(colored=True, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)
    levels = [console_level]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)
        levels.append(file_level)

    logger.setLevel(min(levels))
    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """Log ``exception`` at ERROR level with its traceback."""
    logger.error(f"{message}: {exception}",
                 exc_info=(type(exception), exception, exception.__traceback__))


class PerformanceLogger:
    """
    Times named operations and logs their duration.

    Example::

        perf = PerformanceLogger(logger, "BoxInspector")
        with perf.measure("classify"):
            ...
        perf.last_duration
    """

    def __init__(self, logger: logging.Logger, component: str, level: int = logging.DEBUG):
        self.logger = logger
        self.component = component
        self.level = level
        self.last_duration: Optional[float] = None

    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        """Time the body of the ``with`` block, logging even when it raises."""
        started = time.perf_counter()
        try:
            yield
        finally:
            self.last_duration = time.perf_counter() - started
            self.logger.log(self.level, f"{self.component} {name} took {self.last_duration:.6f} seconds")
