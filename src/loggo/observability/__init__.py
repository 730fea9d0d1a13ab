"""Observability – structured logging."""

from loggo.observability.logging import (
    FanoutDispatcher,
    Logger,
    LogEvent,
    Severity,
    Sink,
    StructuredLogger,
    new_logger,
)

__all__ = [
    "FanoutDispatcher",
    "LogEvent",
    "Logger",
    "Severity",
    "Sink",
    "StructuredLogger",
    "new_logger",
]
