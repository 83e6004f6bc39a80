"""Logging setup for the command line."""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers added by setup_logging; removed again by reset_logging.
_handlers: list[logging.Handler] = []


def setup_logging(level: int | str = logging.WARNING, log_file: str | Path | None = None) -> None:
    """Configure the root logger. Call once at program start.

    Args:
        level: Logging level, as a number or a name like "DEBUG"
        log_file: Optional file that receives the same records
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    reset_logging()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    _handlers.append(logging.StreamHandler())
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _handlers.append(logging.FileHandler(log_path, mode="w"))

    root = logging.getLogger()
    for handler in _handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)


def reset_logging() -> None:
    """Remove and close handlers installed by setup_logging."""
    root = logging.getLogger()
    while _handlers:
        handler = _handlers.pop()
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)
