"""Observability – StructuredLogger, new_logger() and new_operation_id().

The logger is an immutable handle over a shared :class:`FanoutDispatcher`.
It stamps each call with the clock's time, its severity and the current
operation scope, then dispatches synchronously on the caller's thread::

    log = new_logger(LoggerSettings(log_file_path="/var/log/app.jsonl"))
    req_log = log.with_operation(new_operation_id())
    req_log.info("request received", path="/orders")
    req_log.error("lookup failed", exc, order_id=42)
"""
from __future__ import annotations

from typing import Any, Iterable, TextIO
from uuid import uuid4

from loggo.config.settings import EnvSettingsLoader, LoggerSettings
from loggo.kernel.time import Clock, SystemClock
from loggo.kernel.types import Severity
from loggo.observability.logging.dispatcher import FanoutDispatcher
from loggo.observability.logging.protocol import LogEvent, Sink
from loggo.observability.logging.sinks import ConsoleSink, JsonFileSink
from loggo.observability.logging.termination import FATAL_EXIT_CODE, ProcessTerminator, Terminator


class StructuredLogger:
    """Leveled logger fanning out to every sink of one dispatcher.

    Parameters
    ----------
    dispatcher:
        Shared dispatcher; the logger never owns or mutates it.
    level:
        The logger's own minimum level.  Only consulted by
        :meth:`is_debug_enabled`; each sink filters by its own threshold.
    operation_id:
        Operation scope added to every event as ``operationID`` (``""`` =
        unscoped).
    clock:
        Timestamp source.  Defaults to :class:`SystemClock`.
    terminator:
        Exit capability used by :meth:`fatal`.  Defaults to
        :class:`ProcessTerminator`.
    """

    __slots__ = ("_clock", "_dispatcher", "_level", "_operation_id", "_owned_sinks", "_terminator")

    def __init__(
        self,
        dispatcher: FanoutDispatcher,
        *,
        level: Severity | int | str = Severity.DEBUG,
        operation_id: str = "",
        clock: Clock | None = None,
        terminator: Terminator | None = None,
        owned_sinks: Iterable[JsonFileSink] = (),
    ) -> None:
        self._dispatcher = dispatcher
        self._level = Severity.parse(level)
        self._operation_id = operation_id
        self._clock: Clock = clock or SystemClock()
        self._terminator: Terminator = terminator or ProcessTerminator()
        self._owned_sinks = tuple(owned_sinks)

    @classmethod
    def from_sinks(cls, sinks: Iterable[Sink], **kwargs: Any) -> "StructuredLogger":
        """Build a logger over a fresh dispatcher for *sinks* (not owned)."""
        return cls(FanoutDispatcher(sinks), **kwargs)

    @property
    def dispatcher(self) -> FanoutDispatcher:
        return self._dispatcher

    @property
    def level(self) -> Severity:
        return self._level

    @property
    def operation_id(self) -> str:
        return self._operation_id

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def debug(self, msg: str, /, **attrs: Any) -> None:
        self._log(Severity.DEBUG, msg, attrs)

    def info(self, msg: str, /, **attrs: Any) -> None:
        self._log(Severity.INFO, msg, attrs)

    def warn(self, msg: str, /, **attrs: Any) -> None:
        self._log(Severity.WARN, msg, attrs)

    # stdlib-style alias
    warning = warn

    def error(self, msg: str, err: BaseException | None = None, /, **attrs: Any) -> None:
        """Log at ``ERROR`` with *err* under ``error`` (empty when ``None``)."""
        self._log(Severity.ERROR, msg, attrs, err=err, has_error=True)

    def fatal(self, msg: str, err: BaseException | None = None, /, **attrs: Any) -> None:
        """Log like :meth:`error`, then terminate the process with status 1.

        Dispatch completes before the terminator runs.  The terminator is
        invoked exactly once, even if dispatch raised.
        """
        try:
            self._log(Severity.ERROR, msg, attrs, err=err, has_error=True)
        finally:
            self._terminator.exit(FATAL_EXIT_CODE)

    def _log(
        self,
        severity: Severity,
        msg: str,
        attrs: dict[str, Any],
        *,
        err: BaseException | None = None,
        has_error: bool = False,
    ) -> None:
        if not self._dispatcher.admits(severity):
            return
        event = LogEvent(
            severity=severity,
            message=msg,
            timestamp=self._clock.now(),
            attributes=tuple(attrs.items()),
            operation_id=self._operation_id,
            error=err,
            has_error=has_error,
        )
        self._dispatcher.dispatch(event)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_operation(self, operation_id: str) -> "StructuredLogger":
        """Return a sibling logger scoped to *operation_id*.

        The receiver is left untouched; the child shares the dispatcher but
        owns no sinks, so closing it is a no-op.
        """
        return StructuredLogger(
            self._dispatcher,
            level=self._level,
            operation_id=operation_id,
            clock=self._clock,
            terminator=self._terminator,
        )

    def is_debug_enabled(self) -> bool:
        return self._level <= Severity.DEBUG

    def close(self) -> None:
        """Release the sinks this logger was built with by :func:`new_logger`."""
        for sink in self._owned_sinks:
            sink.close()

    def __repr__(self) -> str:
        return (
            f"StructuredLogger(level={self._level.label}, "
            f"operation_id={self._operation_id!r}, sinks={len(self._dispatcher.sinks)})"
        )


def new_logger(
    settings: LoggerSettings | None = None,
    *,
    console_stream: TextIO | None = None,
    clock: Clock | None = None,
    terminator: Terminator | None = None,
) -> StructuredLogger:
    """Build the standard two-sink logger from *settings*.

    Sinks, in order: a :class:`JsonFileSink` at ``settings.log_file_path``
    with threshold ``settings.level``, and a :class:`ConsoleSink` with
    threshold ``settings.console_level``.  When *settings* is ``None`` they
    are loaded from ``LOGGO_*`` environment variables.

    Raises
    ------
    LoggerConstructionError
        The log file cannot be opened for append.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(LoggerSettings)
    file_sink = JsonFileSink(settings.log_file_path, settings.level)
    console_sink = ConsoleSink(console_stream, settings.console_level)
    return StructuredLogger(
        FanoutDispatcher([file_sink, console_sink]),
        level=settings.level,
        clock=clock,
        terminator=terminator,
        owned_sinks=[file_sink],
    )


def new_operation_id() -> str:
    """Return a fresh opaque operation identifier (random UUID4)."""
    return str(uuid4())


__all__ = ["StructuredLogger", "new_logger", "new_operation_id"]
