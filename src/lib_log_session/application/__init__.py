"""Application layer: backend ports and the host session log contract."""

from __future__ import annotations

from .ports import BackendLogger, BackendLoggerFactory
from .session_log import HIDDEN_PARAMETER, SessionLog

__all__ = ["BackendLogger", "BackendLoggerFactory", "HIDDEN_PARAMETER", "SessionLog"]
