"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError             (application.py)
    │   ├── InvalidSeverityError
    │   └── ConfigError              (loggo.config.validation)
    └── InfrastructureError          (infrastructure.py)
        ├── LoggerConstructionError
        └── SinkWriteError
"""

from loggo.kernel.errors.application import ApplicationError, InvalidSeverityError
from loggo.kernel.errors.base import BaseError
from loggo.kernel.errors.infrastructure import (
    InfrastructureError,
    LoggerConstructionError,
    SinkWriteError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "InvalidSeverityError",
    "LoggerConstructionError",
    "SinkWriteError",
]
