"""Observability – JsonFileSink, the durable JSON-lines sink."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from loggo.kernel.errors import LoggerConstructionError
from loggo.kernel.types import Severity
from loggo.observability.logging.sinks.base import RenderingSink


class JsonFileSink(RenderingSink):
    """Append JSON lines to a file.  Records everything by default.

    The file is opened for append at construction; failure to open it is a
    startup error (:class:`LoggerConstructionError`), not a write error.  The
    sink owns the handle and releases it in :meth:`close`.
    """

    def __init__(
        self,
        path: str | Path,
        level: Severity | int | str = Severity.DEBUG,
        *,
        name: str = "file",
    ) -> None:
        super().__init__(level, name=name)
        self._path = Path(path)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._fh = open(self._path, "a", encoding="utf-8")  # noqa: SIM115
        except OSError as exc:
            raise LoggerConstructionError(str(self._path), cause=exc) from exc
        self._renderer = structlog.processors.JSONRenderer(default=str)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._fh.closed

    def _render(self, fields: dict[str, Any], severity: Severity) -> str:
        return self._renderer(None, severity.label.lower(), fields)

    def _emit(self, line: str) -> None:
        self._fh.write(line + "\n")
        self._fh.flush()

    def close(self) -> None:
        with self._lock:
            if not self._fh.closed:
                self._fh.close()

    def __enter__(self) -> "JsonFileSink":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["JsonFileSink"]
