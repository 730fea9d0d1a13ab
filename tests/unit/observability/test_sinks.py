"""Unit tests for the durable (JSON-lines) and console (logfmt) sinks."""

from __future__ import annotations

import io
import json
import threading
from datetime import UTC, datetime
from pathlib import Path

import pytest

from loggo.kernel.errors import LoggerConstructionError, SinkWriteError
from loggo.observability.logging import ConsoleSink, JsonFileSink, LogEvent, Severity, Sink

_TS = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def _event(msg: str = "hello", severity: Severity = Severity.INFO, **attrs: object) -> LogEvent:
    return LogEvent(severity, msg, timestamp=_TS, attributes=tuple(attrs.items()))


def _read_jsonl(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


# ---------------------------------------------------------------------------
# JsonFileSink
# ---------------------------------------------------------------------------


class TestJsonFileSink:
    def test_default_threshold_is_debug(self, tmp_path: Path) -> None:
        with JsonFileSink(tmp_path / "app.jsonl") as sink:
            assert sink.threshold is Severity.DEBUG
            assert isinstance(sink, Sink)

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "app.jsonl"
        with JsonFileSink(path) as sink:
            assert sink.write(_event()).is_ok()
        assert path.exists()

    def test_one_record_per_line(self, tmp_path: Path) -> None:
        path = tmp_path / "app.jsonl"
        with JsonFileSink(path) as sink:
            sink.write(_event("first"))
            sink.write(_event("second", Severity.WARN))
        records = _read_jsonl(path)
        assert [r["msg"] for r in records] == ["first", "second"]
        assert [r["level"] for r in records] == ["INFO", "WARN"]
        assert records[0]["timestamp"] == "2026-01-01T12:00:00+00:00"

    def test_appends_to_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "app.jsonl"
        path.write_text('{"msg": "earlier"}\n', encoding="utf-8")
        with JsonFileSink(path) as sink:
            sink.write(_event("later"))
        assert [r["msg"] for r in _read_jsonl(path)] == ["earlier", "later"]

    def test_round_trip_preserves_attributes(self, tmp_path: Path) -> None:
        path = tmp_path / "app.jsonl"
        attrs = {
            "user": "alice",
            "count": 3,
            "ratio": 0.5,
            "ok": True,
            "missing": None,
            "tags": ["a", "b"],
            "nested": {"k": "v"},
            "text": 'quote " and = and spaces',
        }
        with JsonFileSink(path) as sink:
            sink.write(_event("round trip", Severity.ERROR, **attrs))
        (record,) = _read_jsonl(path)
        assert record["level"] == "ERROR"
        assert record["msg"] == "round trip"
        for key, value in attrs.items():
            assert record[key] == value

    def test_non_json_values_are_stringified(self, tmp_path: Path) -> None:
        path = tmp_path / "app.jsonl"
        with JsonFileSink(path) as sink:
            assert sink.write(_event(path=Path("/srv/data"))).is_ok()
        assert _read_jsonl(path)[0]["path"] == "/srv/data"

    def test_encode_failure_is_returned_not_raised(self, tmp_path: Path) -> None:
        cyclic: list[object] = []
        cyclic.append(cyclic)
        with JsonFileSink(tmp_path / "app.jsonl") as sink:
            result = sink.write(_event(loop=cyclic))
        assert result.is_err()
        assert isinstance(result.error, SinkWriteError)
        assert result.error.sink == "file"
        assert isinstance(result.error.cause, ValueError)

    def test_write_after_close_is_err(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path / "app.jsonl")
        sink.close()
        assert sink.closed
        assert sink.write(_event()).is_err()

    def test_close_is_idempotent(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path / "app.jsonl")
        sink.close()
        sink.close()
        assert sink.closed

    def test_unopenable_target_raises_construction_error(self, tmp_path: Path) -> None:
        with pytest.raises(LoggerConstructionError) as exc_info:
            JsonFileSink(tmp_path)
        assert exc_info.value.target == str(tmp_path)
        assert isinstance(exc_info.value.cause, OSError)

    def test_concurrent_writers_never_interleave(self, tmp_path: Path) -> None:
        path = tmp_path / "app.jsonl"
        sink = JsonFileSink(path)

        def worker(n: int) -> None:
            for i in range(50):
                sink.write(_event(f"w{n}-{i}", payload="x" * 512))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        sink.close()

        records = _read_jsonl(path)
        assert len(records) == 400
        for n in range(8):
            own = [r["msg"] for r in records if r["msg"].startswith(f"w{n}-")]
            assert own == [f"w{n}-{i}" for i in range(50)]


# ---------------------------------------------------------------------------
# ConsoleSink
# ---------------------------------------------------------------------------


class TestConsoleSink:
    def test_default_threshold_is_info(self) -> None:
        assert ConsoleSink(io.StringIO()).threshold is Severity.INFO

    def test_logfmt_line(self) -> None:
        stream = io.StringIO()
        ConsoleSink(stream).write(_event("Operation log", user="alice"))
        line = stream.getvalue()
        assert line.endswith("\n")
        assert line.count("\n") == 1
        assert "timestamp=2026-01-01T12:00:00+00:00" in line
        assert "level=INFO" in line
        assert 'msg="Operation log"' in line
        assert "user=alice" in line

    def test_field_order_matches_durable_format(self) -> None:
        stream = io.StringIO()
        ConsoleSink(stream).write(_event("m", a=1, b=2))
        keys = [part.split("=", 1)[0] for part in stream.getvalue().split()]
        assert keys == ["timestamp", "level", "msg", "a", "b"]

    def test_absent_error_rendered_empty(self) -> None:
        stream = io.StringIO()
        event = LogEvent(Severity.ERROR, "bad", timestamp=_TS, has_error=True)
        ConsoleSink(stream).write(event)
        assert stream.getvalue().rstrip("\n").endswith(" error=")

    def test_booleans_rendered_as_words(self) -> None:
        stream = io.StringIO()
        ConsoleSink(stream).write(_event(ok=True, retry=False))
        line = stream.getvalue()
        assert "ok=true" in line
        assert "retry=false" in line

    def test_invalid_key_is_returned_not_raised(self) -> None:
        stream = io.StringIO()
        result = ConsoleSink(stream).write(_event(**{"bad key": 1}))
        assert result.is_err()
        assert result.error.sink == "console"
        assert stream.getvalue() == ""

    def test_defaults_to_current_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleSink().write(_event("to stdout"))
        assert 'msg="to stdout"' in capsys.readouterr().out

    def test_closed_stream_is_err(self) -> None:
        stream = io.StringIO()
        stream.close()
        assert ConsoleSink(stream).write(_event()).is_err()
