"""Observability – LogEvent, Sink and Logger protocols."""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any, Protocol, runtime_checkable

from loggo.kernel.errors import SinkWriteError
from loggo.kernel.types import Result, Severity

TIMESTAMP_KEY = "timestamp"
LEVEL_KEY = "level"
MESSAGE_KEY = "msg"
ERROR_KEY = "error"
OPERATION_KEY = "operationID"

_HEADER_KEYS = frozenset({TIMESTAMP_KEY, LEVEL_KEY, MESSAGE_KEY})
_SHADOWED_PREFIX = "attr_"


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """Immutable structured log entry handed to every admitting sink.

    ``attributes`` keeps call order; when flattened, a later duplicate key
    wins.  ``has_error`` marks Error/Fatal emissions so that an absent
    ``error`` is still recorded as an explicit empty field.
    """

    severity: Severity
    message: str
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    attributes: tuple[tuple[str, Any], ...] = ()
    operation_id: str = ""
    error: BaseException | None = None
    has_error: bool = False

    @property
    def error_message(self) -> str | None:
        return None if self.error is None else str(self.error)

    def fields(self) -> dict[str, Any]:
        """Flatten into the wire field set shared by every sink encoding.

        Attributes named like a header field (``timestamp``, ``level``,
        ``msg``) are re-keyed with an ``attr_`` prefix so the header stays
        authoritative.
        """
        out: dict[str, Any] = {
            TIMESTAMP_KEY: self.timestamp.isoformat(),
            LEVEL_KEY: self.severity.label,
            MESSAGE_KEY: self.message,
        }
        for key, value in self.attributes:
            if key in _HEADER_KEYS:
                key = _SHADOWED_PREFIX + key
            out[key] = value
        if self.has_error:
            out[ERROR_KEY] = self.error_message
        if self.operation_id:
            out[OPERATION_KEY] = self.operation_id
        return out


@runtime_checkable
class Sink(Protocol):
    """Port: a delivery target with its own severity threshold.

    ``write`` must never raise for encode or I/O failures; it reports them
    as ``Err(SinkWriteError)``.
    """

    @property
    def threshold(self) -> Severity: ...

    def write(self, event: LogEvent) -> Result[None, SinkWriteError]: ...


@runtime_checkable
class Logger(Protocol):
    """Leveled emission API shared by the real logger and its test double."""

    def debug(self, msg: str, /, **attrs: Any) -> None: ...
    def info(self, msg: str, /, **attrs: Any) -> None: ...
    def warn(self, msg: str, /, **attrs: Any) -> None: ...
    def error(self, msg: str, err: BaseException | None = None, /, **attrs: Any) -> None: ...
    def fatal(self, msg: str, err: BaseException | None = None, /, **attrs: Any) -> None: ...
    def with_operation(self, operation_id: str) -> "Logger": ...
    def is_debug_enabled(self) -> bool: ...


__all__ = [
    "ERROR_KEY",
    "LEVEL_KEY",
    "MESSAGE_KEY",
    "OPERATION_KEY",
    "TIMESTAMP_KEY",
    "LogEvent",
    "Logger",
    "Sink",
]
