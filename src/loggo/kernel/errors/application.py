"""Application-layer errors — misuse of the library by its caller."""

from __future__ import annotations

from typing import Any

from loggo.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidSeverityError(ApplicationError, ValueError):
    """A level name or number does not map onto any severity."""

    default_code = "invalid_severity"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown severity {value!r}; expected one of DEBUG, INFO, WARN, ERROR",
            **kwargs,
        )
        self.value = value


__all__ = ["ApplicationError", "InvalidSeverityError"]
