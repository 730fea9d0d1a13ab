"""Debugger adapter – DebugEventBridge.

Crawler frameworks commonly expose a debugger hook receiving small events
with a ``type`` (``request``, ``response``, ``scraped``, …) and a string
``values`` payload.  The bridge turns each one into a single debug line.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from loggo.observability.logging.protocol import Logger

_EVENT_MESSAGES = {
    "request": "Request",
    "response": "Response",
    "scraped": "Scraped",
}
_UNKNOWN_MESSAGE = "Unknown event"


@dataclasses.dataclass(frozen=True)
class DebugEvent:
    """A foreign debug event."""

    type: str
    values: Mapping[str, str] = dataclasses.field(default_factory=dict)
    request_id: int | None = None
    collector_id: int | None = None


class DebugEventBridge:
    """Debugger hook forwarding every event to ``logger.debug``.

    Any object with ``type`` and ``values`` attributes is accepted.  Event
    kinds outside the known set are logged as ``"Unknown event"`` with the
    original kind under ``event_type``.
    """

    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def init(self) -> None:
        self._logger.debug("Debugger initialized")

    def event(self, event: Any) -> None:
        kind = str(getattr(event, "type", "") or "")
        attrs: dict[str, Any] = {"event_type": kind}
        for attr in ("request_id", "collector_id"):
            value = getattr(event, attr, None)
            if value is not None:
                attrs[attr] = value
        attrs.update(dict(getattr(event, "values", None) or {}))
        self._logger.debug(_EVENT_MESSAGES.get(kind, _UNKNOWN_MESSAGE), **attrs)

    __call__ = event


__all__ = ["DebugEvent", "DebugEventBridge"]
