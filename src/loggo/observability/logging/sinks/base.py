"""Observability – RenderingSink base class."""
from __future__ import annotations

import abc
import threading
from typing import Any

from loggo.kernel.errors import SinkWriteError
from loggo.kernel.types import Err, Ok, Result, Severity
from loggo.observability.logging.protocol import LogEvent


class RenderingSink(abc.ABC):
    """Base for sinks that render an event to one line of text and append it.

    Subclasses provide ``_render`` (event fields → line) and ``_emit`` (line
    → target).  Any exception raised by either is captured and returned as
    ``Err(SinkWriteError)``.  Appends are serialised with a per-sink lock so
    concurrent callers never interleave a record.
    """

    def __init__(self, level: Severity | int | str, *, name: str) -> None:
        self._threshold = Severity.parse(level)
        self.name = name
        self._lock = threading.Lock()

    @property
    def threshold(self) -> Severity:
        return self._threshold

    def write(self, event: LogEvent) -> Result[None, SinkWriteError]:
        try:
            line = self._render(event.fields(), event.severity)
            with self._lock:
                self._emit(line)
        except Exception as exc:  # noqa: BLE001
            return Err(SinkWriteError(self.name, f"Sink '{self.name}' failed: {exc}", cause=exc))
        return Ok(None)

    @abc.abstractmethod
    def _render(self, fields: dict[str, Any], severity: Severity) -> str: ...

    @abc.abstractmethod
    def _emit(self, line: str) -> None: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, threshold={self._threshold.label})"


__all__ = ["RenderingSink"]
