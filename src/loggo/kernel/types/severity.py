"""Kernel types – Severity."""

from __future__ import annotations

from enum import IntEnum

from loggo.kernel.errors import InvalidSeverityError

_ALIASES = {
    "WARNING": "WARN",
    "ERR": "ERROR",
}


class Severity(IntEnum):
    """Ordered levels: ``DEBUG < INFO < WARN < ERROR``.

    Numeric values line up with the stdlib :mod:`logging` levels so a
    ``logging.LogRecord.levelno`` can be compared directly.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def label(self) -> str:
        """Upper-case wire name (``DEBUG|INFO|WARN|ERROR``)."""
        return self.name

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """Coerce a member, a numeric level or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as exc:
                raise InvalidSeverityError(value) from exc
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError as exc:
                raise InvalidSeverityError(value) from exc
        raise InvalidSeverityError(value)

    @classmethod
    def from_stdlib(cls, levelno: int) -> "Severity":
        """Map any stdlib level number onto the nearest severity at or below it.

        ``CRITICAL`` collapses to ``ERROR``; anything under ``INFO`` is ``DEBUG``.
        """
        if levelno >= cls.ERROR:
            return cls.ERROR
        if levelno >= cls.WARN:
            return cls.WARN
        if levelno >= cls.INFO:
            return cls.INFO
        return cls.DEBUG


__all__ = ["Severity"]
