"""Infrastructure errors — failures of the write targets behind a sink."""

from __future__ import annotations

from typing import Any

from loggo.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class LoggerConstructionError(InfrastructureError):
    """A sink's write target could not be opened at startup.

    This is the only error the logging core lets reach its caller.
    """

    default_code = "logger_construction_error"

    def __init__(
        self,
        target: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not open log target '{target}'", **kwargs)
        self.target = target


class SinkWriteError(InfrastructureError):
    """A single sink failed to encode or persist one event.

    Sinks return it inside an ``Err``; the dispatcher reports it and moves on.
    """

    default_code = "sink_write_error"

    def __init__(
        self,
        sink: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Sink '{sink}' failed to write event", **kwargs)
        self.sink = sink


__all__ = [
    "InfrastructureError",
    "LoggerConstructionError",
    "SinkWriteError",
]
