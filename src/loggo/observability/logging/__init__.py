"""Observability – leveled multi-sink structured logging."""
from loggo.kernel.types import Severity
from loggo.observability.logging.dispatcher import FanoutDispatcher
from loggo.observability.logging.logger import StructuredLogger, new_logger, new_operation_id
from loggo.observability.logging.protocol import (
    ERROR_KEY,
    OPERATION_KEY,
    LogEvent,
    Logger,
    Sink,
)
from loggo.observability.logging.sinks import ConsoleSink, JsonFileSink, RenderingSink
from loggo.observability.logging.termination import (
    FATAL_EXIT_CODE,
    ProcessTerminator,
    Terminator,
)

__all__ = [
    "ERROR_KEY",
    "FATAL_EXIT_CODE",
    "OPERATION_KEY",
    "ConsoleSink",
    "FanoutDispatcher",
    "JsonFileSink",
    "LogEvent",
    "Logger",
    "ProcessTerminator",
    "RenderingSink",
    "Severity",
    "Sink",
    "StructuredLogger",
    "Terminator",
    "new_logger",
    "new_operation_id",
]
