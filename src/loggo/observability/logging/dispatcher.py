"""Observability – FanoutDispatcher."""
from __future__ import annotations

import logging
from typing import Iterable

from loggo.kernel.errors import SinkWriteError
from loggo.kernel.types import Err, Severity
from loggo.observability.logging.protocol import LogEvent, Sink

_fallback_logger = logging.getLogger("loggo.fallback")


def _sink_name(sink: Sink) -> str:
    return getattr(sink, "name", None) or type(sink).__name__


class FanoutDispatcher:
    """Deliver each event to every sink whose threshold admits its severity.

    Sinks are tried independently and in registration order.  A failing
    sink is reported on the *fallback* logger (stdlib ``logging``, which
    reaches stderr through the last-resort handler when the host application
    configured nothing) and delivery continues with the next sink.  Nothing
    is retried and nothing is raised to the emitting caller.

    The dispatcher holds no mutable state; it only references sinks it does
    not own.
    """

    __slots__ = ("_fallback", "_sinks")

    def __init__(self, sinks: Iterable[Sink], fallback: logging.Logger | None = None) -> None:
        self._sinks: tuple[Sink, ...] = tuple(sinks)
        self._fallback = fallback if fallback is not None else _fallback_logger

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return self._sinks

    def admits(self, severity: Severity) -> bool:
        """Return ``True`` when at least one sink would record *severity*."""
        for sink in self._sinks:
            threshold = self._threshold(sink)
            if threshold is not None and severity >= threshold:
                return True
        return False

    def dispatch(self, event: LogEvent) -> int:
        """Fan *event* out; return how many sinks recorded it."""
        delivered = 0
        for sink in self._sinks:
            threshold = self._threshold(sink)
            if threshold is None or event.severity < threshold:
                continue
            try:
                result = sink.write(event)
            except Exception as exc:  # noqa: BLE001
                # third-party sinks that break the no-raise contract
                result = Err(SinkWriteError(_sink_name(sink), cause=exc))
            if result.is_err():
                self._report(sink, event, result.error)
            else:
                delivered += 1
        return delivered

    def _threshold(self, sink: Sink) -> Severity | None:
        # a sink whose threshold cannot be read is skipped, never raised
        try:
            return sink.threshold
        except Exception as exc:  # noqa: BLE001
            self._fallback.warning("log sink %s skipped: unreadable threshold: %r", _sink_name(sink), exc)
            return None

    def _report(self, sink: Sink, event: LogEvent, error: SinkWriteError) -> None:
        self._fallback.warning(
            "log sink %s dropped %s event %r: %s",
            _sink_name(sink),
            event.severity.label,
            event.message,
            error,
        )


__all__ = ["FanoutDispatcher"]
