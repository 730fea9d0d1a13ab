"""Config settings – LoggerSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from loggo.config.settings.base import Settings
from loggo.config.validation import InvalidSettingValueError
from loggo.kernel.errors import InvalidSeverityError
from loggo.kernel.types import Severity


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Startup configuration for :func:`loggo.observability.logging.new_logger`.

    ``level`` is both the durable sink's threshold and the logger's own
    minimum level (what ``is_debug_enabled()`` reports).  ``console_level``
    only affects the console sink.

    Environment variables (``LOGGO`` prefix)::

        LOGGO_LOG_FILE_PATH=/var/log/app/app.jsonl
        LOGGO_LEVEL=DEBUG
        LOGGO_CONSOLE_LEVEL=INFO
    """

    _prefix: ClassVar[str] = "LOGGO"

    log_file_path: str
    level: Severity | str = Severity.INFO
    console_level: Severity | str = Severity.INFO

    def _validate(self) -> None:
        if not str(self.log_file_path).strip():
            raise InvalidSettingValueError("log_file_path", self.log_file_path, "must not be empty")
        self.level = self._parse_level("level", self.level)
        self.console_level = self._parse_level("console_level", self.console_level)

    @staticmethod
    def _parse_level(name: str, value: Severity | str) -> Severity:
        try:
            return Severity.parse(value)
        except InvalidSeverityError as exc:
            raise InvalidSettingValueError(name, value, "unknown severity") from exc


__all__ = ["LoggerSettings"]
