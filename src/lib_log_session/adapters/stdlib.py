"""Standard-library :mod:`logging` backend implementing the backend ports.

Purpose
-------
Expose ``logging.Logger`` objects through the five-level
:class:`~lib_log_session.application.ports.backend.BackendLogger` contract,
including a ``TRACE`` level below ``DEBUG``.

Contents
--------
* :class:`StdlibBackendLogger` – wraps one ``logging.Logger``.
* :class:`StdlibLoggerFactory` – acquires wrapped loggers by name.

System Role
-----------
Default backend used by :class:`CategorySessionLogger` and the runtime. Level
thresholds, handlers and propagation stay entirely under stdlib control.
"""

from __future__ import annotations

import logging

from lib_log_session.application.ports.backend import BackendLogger, BackendLoggerFactory
from lib_log_session.domain.levels import TRACE_LEVEL

logging.addLevelName(TRACE_LEVEL, "TRACE")


class StdlibBackendLogger(BackendLogger):
    """Backend handle delegating to a :class:`logging.Logger`."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:  # type: ignore[override]
        return self._logger.name

    @property
    def logger(self) -> logging.Logger:
        """Return the wrapped stdlib logger."""

        return self._logger

    def trace(self, message: str) -> None:
        self._logger.log(TRACE_LEVEL, message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(TRACE_LEVEL)

    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.DEBUG)

    def is_info_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.INFO)

    def is_warn_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.WARNING)

    def is_error_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.ERROR)

    def __repr__(self) -> str:
        return f"StdlibBackendLogger({self.name!r})"


class StdlibLoggerFactory(BackendLoggerFactory):
    """Acquire :class:`StdlibBackendLogger` handles via :func:`logging.getLogger`.

    Examples
    --------
    >>> handle = StdlibLoggerFactory().get_logger("org.eclipse.persistence.logging.sql")
    >>> handle.name
    'org.eclipse.persistence.logging.sql'
    """

    def get_logger(self, name: str) -> StdlibBackendLogger:
        return StdlibBackendLogger(logging.getLogger(name))


__all__ = ["StdlibBackendLogger", "StdlibLoggerFactory"]
