"""Observability components: logging and metrics."""

from app.observability.logging import (
    bind_context,
    clear_context,
    get_context,
    get_logger,
    setup_logging,
    unbind_context,
)
from app.observability.metrics import EXPORTS_TOTAL, setup_metrics


__all__ = [
    "EXPORTS_TOTAL",
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "setup_logging",
    "setup_metrics",
    "unbind_context",
]
