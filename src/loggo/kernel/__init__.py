"""Kernel – framework-agnostic building blocks (errors, result, severity, clock)."""

from loggo.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    InvalidSeverityError,
    LoggerConstructionError,
    SinkWriteError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "InvalidSeverityError",
    "LoggerConstructionError",
    "SinkWriteError",
]
