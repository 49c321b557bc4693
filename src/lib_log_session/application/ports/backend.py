"""Backend logger port describing the structured logging library contract.

Purpose
-------
Define the narrow surface the session log adapter needs from the backend:
acquire a handle by name, write at one of five levels, and ask whether a level
is enabled.

Contents
--------
* :class:`BackendLogger` – runtime-checkable protocol for logger handles.
* :class:`BackendLoggerFactory` – protocol for acquiring handles by name.

System Role
-----------
Keeps the adapter independent of :mod:`logging` so tests and alternative
backends can plug in recording handles without touching the adapter.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BackendLogger(Protocol):
    """Named logger handle offered by the backend."""

    name: str

    def trace(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def is_trace_enabled(self) -> bool: ...

    def is_debug_enabled(self) -> bool: ...

    def is_info_enabled(self) -> bool: ...

    def is_warn_enabled(self) -> bool: ...

    def is_error_enabled(self) -> bool: ...


@runtime_checkable
class BackendLoggerFactory(Protocol):
    """Acquire backend logger handles by fully qualified name."""

    def get_logger(self, name: str) -> BackendLogger:
        """Return the handle for ``name``; failures propagate to the caller."""


__all__ = ["BackendLogger", "BackendLoggerFactory"]
