"""Kernel value types — public re-export surface.

Modules:
  result.py   — Ok, Err, Result
  severity.py — Severity
"""

from loggo.kernel.types.result import Err, Ok, Result
from loggo.kernel.types.severity import Severity

__all__ = ["Err", "Ok", "Result", "Severity"]
