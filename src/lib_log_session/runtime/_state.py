"""Runtime state container and access helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Mapping

from lib_log_session.adapters.session_logger import CategorySessionLogger

from ._settings import RuntimeSettings


@dataclass(slots=True)
class SessionRuntime:
    """Aggregate of live collaborators assembled by the composition root.

    ``previous_levels`` records the stdlib level of every logger the runtime
    touched so shutdown can restore it.
    """

    session_log: CategorySessionLogger
    settings: RuntimeSettings
    handler: logging.Handler | None
    previous_levels: Mapping[str, int]


_STATE: SessionRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: SessionRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> SessionRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_session.init() must be called before using the session log")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_session.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "SessionRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
