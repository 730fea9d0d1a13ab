"""Observability – ConsoleSink, logfmt lines for interactive output."""
from __future__ import annotations

import sys
from typing import Any, TextIO

import structlog

from loggo.kernel.types import Severity
from loggo.observability.logging.sinks.base import RenderingSink


class ConsoleSink(RenderingSink):
    """Write one logfmt line per event to a text stream.

    Defaults to ``INFO`` so debug chatter stays out of the terminal.  When
    *stream* is ``None`` the current ``sys.stdout`` is looked up on every
    write.  The sink never closes its stream.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        level: Severity | int | str = Severity.INFO,
        *,
        name: str = "console",
    ) -> None:
        super().__init__(level, name=name)
        self._stream = stream
        self._renderer = structlog.processors.LogfmtRenderer(bool_as_flag=False)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _render(self, fields: dict[str, Any], severity: Severity) -> str:
        return self._renderer(None, severity.label.lower(), fields)

    def _emit(self, line: str) -> None:
        stream = self.stream
        stream.write(line + "\n")
        stream.flush()


__all__ = ["ConsoleSink"]
