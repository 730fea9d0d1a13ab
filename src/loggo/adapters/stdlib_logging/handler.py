"""Stdlib logging adapter – LoggoHandler (a :class:`logging.Handler`)."""
from __future__ import annotations

import logging
from typing import Any

from loggo.kernel.types import Severity
from loggo.observability.logging.protocol import Logger

_OWN_NAMESPACE = "loggo"


class LoggoHandler(logging.Handler):
    """Forward third-party :mod:`logging` records to a loggo :class:`Logger`.

    ``CRITICAL`` records are logged at ``ERROR``; the handler never calls
    ``fatal``.  Records emitted under the ``loggo`` namespace (such as the
    dispatcher's fallback warnings) are ignored so a broken sink cannot
    feed back into itself.

    Typical usage::

        logging.getLogger().addHandler(LoggoHandler(log))
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == _OWN_NAMESPACE or record.name.startswith(_OWN_NAMESPACE + "."):
            return
        try:
            severity = Severity.from_stdlib(record.levelno)
            attrs: dict[str, Any] = {"logger": record.name}
            err = record.exc_info[1] if record.exc_info else None
            if severity is Severity.ERROR:
                self._logger.error(record.getMessage(), err, **attrs)
            elif severity is Severity.WARN:
                self._logger.warn(record.getMessage(), **attrs)
            elif severity is Severity.INFO:
                self._logger.info(record.getMessage(), **attrs)
            else:
                self._logger.debug(record.getMessage(), **attrs)
        except Exception:  # noqa: BLE001
            self.handleError(record)


__all__ = ["LoggoHandler"]
