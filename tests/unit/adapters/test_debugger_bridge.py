"""Unit tests for the debugger event bridge."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from loggo.adapters.debugger import DebugEvent, DebugEventBridge
from loggo.kernel.types import Severity
from loggo.testing.fakes import FakeLogger


class TestDebugEventBridge:
    @pytest.mark.parametrize(
        ("kind", "message"),
        [("request", "Request"), ("response", "Response"), ("scraped", "Scraped")],
    )
    def test_known_kinds(self, fake_logger: FakeLogger, kind: str, message: str) -> None:
        bridge = DebugEventBridge(fake_logger)
        bridge.event(DebugEvent(kind, {"url": "https://example.com"}, request_id=4))
        record = fake_logger.records[0]
        assert record.severity is Severity.DEBUG
        assert record.message == message
        assert record.attributes == {
            "event_type": kind,
            "request_id": 4,
            "url": "https://example.com",
        }

    def test_unknown_kind(self, fake_logger: FakeLogger) -> None:
        DebugEventBridge(fake_logger).event(DebugEvent("redirect", {"to": "/x"}))
        record = fake_logger.records[0]
        assert record.message == "Unknown event"
        assert record.attributes["event_type"] == "redirect"
        assert record.attributes["to"] == "/x"

    def test_duck_typed_event(self, fake_logger: FakeLogger) -> None:
        bridge = DebugEventBridge(fake_logger)
        bridge(SimpleNamespace(type="response", values={"status": "200"}))
        assert fake_logger.debug_messages == ["Response"]

    def test_init_logs_and_returns_none(self, fake_logger: FakeLogger) -> None:
        assert DebugEventBridge(fake_logger).init() is None
        assert fake_logger.debug_messages == ["Debugger initialized"]

    def test_only_debug_is_used(self, fake_logger: FakeLogger) -> None:
        bridge = DebugEventBridge(fake_logger)
        for kind in ("request", "response", "scraped", "other"):
            bridge.event(DebugEvent(kind))
        assert len(fake_logger.debug_messages) == 4
        assert fake_logger.info_messages == []
