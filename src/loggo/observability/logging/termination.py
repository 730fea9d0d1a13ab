"""Observability – Terminator port used by ``fatal``."""
from __future__ import annotations

import os
import sys
from typing import Protocol

FATAL_EXIT_CODE = 1


class Terminator(Protocol):
    """Port: end the process with *code*.  Substituted by a fake in tests."""

    def exit(self, code: int) -> None: ...


class ProcessTerminator:
    """Exit immediately via ``os._exit`` after flushing the standard streams.

    ``os._exit`` cannot be swallowed by an ``except SystemExit`` further up
    the stack, so a fatal log always ends the process.
    """

    def exit(self, code: int) -> None:
        for stream in (sys.stdout, sys.stderr):
            try:
                stream.flush()
            except (OSError, ValueError):
                pass
        os._exit(code)


__all__ = ["FATAL_EXIT_CODE", "ProcessTerminator", "Terminator"]
