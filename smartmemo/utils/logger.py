"""Logging setup for the SmartMemo backend."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "smartmemo"

# httpx logs every request line at INFO, including full URLs.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(
    name: str = LOGGER_NAME,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return the application logger.

    Handlers are attached once; later calls return the logger unchanged.
    Transport library loggers stay at WARNING unless `level` is DEBUG.

    Args:
        name: Logger name.
        level: Logging level, as a number or a name such as "debug".
        log_file: Optional path to log file. If None, logs to stderr only.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    numeric = _resolve_level(level)
    log.setLevel(numeric)
    fmt = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    for transport in _TRANSPORT_LOGGERS:
        logging.getLogger(transport).setLevel(logging.DEBUG if numeric <= logging.DEBUG else logging.WARNING)

    return log


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the application logger. Use after setup_logger has been called."""
    return logging.getLogger(name)
