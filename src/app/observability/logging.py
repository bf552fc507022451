"""Logging configuration using Loguru.

This module provides:
- Structured JSON logging for production
- Human-readable colorized output for development
- Request-scoped context (request_id, user_id, ...) via a ContextVar
- Interception of standard library logging
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson
from loguru import logger


if TYPE_CHECKING:
    from loguru import Logger, Record


_log_context: ContextVar[dict[str, Any] | None] = ContextVar("log_context", default=None)

_NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "asyncio",
    "PIL",
    "fontTools",
)


class InterceptHandler(logging.Handler):
    """Forward standard library log records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _merge_context(record: Record) -> None:
    """Patcher that copies the request context into every record."""
    context = _log_context.get()
    if context:
        record["extra"].update(context)


def _format_json(record: Record) -> str:
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["extra"].get("name", record["name"]),
        "function": record["function"],
        "line": record["line"],
        **{k: v for k, v in record["extra"].items() if k not in ("name", "_json")},
    }

    exception = record["exception"]
    if exception:
        payload["exception"] = {
            "type": exception.type.__name__ if exception.type else None,
            "value": str(exception.value) if exception.value else None,
        }

    # Stash the serialized line so the format string stays brace-safe
    record["extra"]["_json"] = orjson.dumps(payload, default=str).decode()
    return "{extra[_json]}\n"


def _format_text(record: Record) -> str:
    context = {
        k: v for k, v in record["extra"].items() if k not in ("name", "_json")
    }
    context_str = ""
    if context:
        context_str = " | " + " ".join(f"{k}={v}" for k, v in context.items())
    # Escape braces in context values since loguru formats the result again
    context_str = context_str.replace("{", "{{").replace("}", "}}")

    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
        f"{context_str} - "
        "<level>{message}</level>\n"
    )
    if record["exception"]:
        fmt += "{exception}\n"
    return fmt


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    *,
    is_development: bool = False,
    log_file: Path | str | None = None,
) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: "json" or "text".
        is_development: Force human-readable output.
        log_file: Optional path for a rotated JSON log file.
    """
    logger.remove()
    logger.configure(patcher=_merge_context)

    level = log_level.upper()
    if log_format == "json" and not is_development:
        logger.add(
            sys.stdout,
            format=_format_json,
            level=level,
            colorize=False,
            backtrace=True,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stdout,
            format=_format_text,
            level=level,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=_format_json,
            level=level,
            rotation="100 MB",
            retention="7 days",
            compression="gz",
            backtrace=True,
            diagnose=False,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Logger:
    """Return the shared Loguru logger bound to ``name``."""
    return logger.bind(name=name)


def bind_context(**kwargs: Any) -> None:
    """Add key-value pairs to the logging context of the current task.

    Example:
        bind_context(request_id="abc-123", user_id="user-456")
    """
    current = dict(_log_context.get() or {})
    current.update(kwargs)
    _log_context.set(current)


def unbind_context(*keys: str) -> None:
    """Remove keys from the logging context."""
    current = dict(_log_context.get() or {})
    for key in keys:
        current.pop(key, None)
    _log_context.set(current)


def clear_context() -> None:
    """Reset the logging context. Called at the start of every request."""
    _log_context.set({})


def get_context() -> dict[str, Any]:
    """Return a copy of the current logging context."""
    return dict(_log_context.get() or {})


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "setup_logging",
    "unbind_context",
]
