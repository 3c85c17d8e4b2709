"""
Central logging configuration.
Creates console and optional file handlers with support for TRACE/INFO/WARNING/ERROR levels.
"""
from __future__ import annotations

import functools
import logging
import os
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar

from quickbite.core.config import settings

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

# Levels that LOG_LEVELS may allow, keyed by their configuration names.
SUPPORTED_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _log_trace(self: logging.Logger, message: str, *args, **kwargs) -> None:
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)


logging.Logger.trace = _log_trace  # type: ignore[attr-defined]


class LogLevelFilter(logging.Filter):
    """Pass only records whose level is in ``allowed_levels``."""

    def __init__(self, allowed_levels: set[int]) -> None:
        super().__init__()
        self.allowed_levels = frozenset(allowed_levels)

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno in self.allowed_levels


def parse_allowed_levels(raw: Optional[str]) -> set[int]:
    """Parse a comma-separated level list such as ``"TRACE,ERROR"``.

    Unknown names are ignored; an empty or fully unknown list allows every
    supported level.
    """
    names = (part.strip().upper() for part in (raw or "").split(","))
    levels = {SUPPORTED_LEVELS[name] for name in names if name in SUPPORTED_LEVELS}
    return levels or set(SUPPORTED_LEVELS.values())


def resolve_level(level_name: Optional[str]) -> int:
    """Map LOG_LEVEL to a numeric level, defaulting to INFO."""
    normalized = (level_name or "").strip().upper()
    if normalized in SUPPORTED_LEVELS:
        return SUPPORTED_LEVELS[normalized]
    return getattr(logging, normalized, logging.INFO) if normalized else logging.INFO


def configure_logging() -> None:
    """Configure root logger with a console handler and, if configured, a file handler."""
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(settings.LOG_LEVEL))
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    level_filter = LogLevelFilter(parse_allowed_levels(settings.LOG_LEVELS))

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.LOG_FILE_PATH:
        log_dir = os.path.dirname(settings.LOG_FILE_PATH)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(settings.LOG_FILE_PATH))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(level_filter)
        root_logger.addHandler(handler)


def log_db_timing(func: F) -> F:
    """
    Decorator to log the execution time of async database operations.
    Logs the qualified function name, arguments (excluding 'self'),
    and the duration in milliseconds.
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        logger = logging.getLogger(func.__module__)

        arg_parts = [str(arg) for arg in args[1:]]
        arg_parts.extend(f"{key}={value}" for key, value in kwargs.items())
        args_str = ", ".join(arg_parts)

        start_time = time.perf_counter()
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "DB_OP | %s | duration=%.3fms | args=(%s) | error=%s",
                func.__qualname__,
                elapsed_ms,
                args_str,
                str(e),
            )
            raise
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "DB_OP | %s | duration=%.3fms | args=(%s)",
            func.__qualname__,
            elapsed_ms,
            args_str,
        )
        return result
    return wrapper  # type: ignore[return-value]
