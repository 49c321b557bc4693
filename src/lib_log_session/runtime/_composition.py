"""Runtime composition helpers wiring the stdlib backend and the adapter.

Purpose
-------
Translate :class:`RuntimeSettings` into a live :class:`SessionRuntime`: apply
backend thresholds to the namespace and category loggers, attach the Rich
console handler, and construct the session logger.

Contents
--------
* :func:`build_runtime` – composition root used by :func:`lib_log_session.init`.
* :func:`teardown_runtime` – reverse of :func:`build_runtime`.
"""

from __future__ import annotations

import logging
from typing import Callable

from lib_log_session.adapters.console.rich_console import RichConsoleHandler
from lib_log_session.adapters.session_logger import CategorySessionLogger
from lib_log_session.application.ports.backend import BackendLoggerFactory
from lib_log_session.domain.categories import NAMESPACE, logger_name

from ._settings import RuntimeSettings
from ._state import SessionRuntime


HandlerFactory = Callable[[RuntimeSettings], logging.Handler]

logger = logging.getLogger(__name__)


def create_console_handler(settings: RuntimeSettings) -> logging.Handler:
    """Return the default Rich console handler configured from ``settings``."""

    return RichConsoleHandler(
        force_color=settings.force_color,
        no_color=settings.no_color,
        styles=settings.console_styles,
    )


def build_runtime(
    settings: RuntimeSettings,
    *,
    factory: BackendLoggerFactory | None = None,
    handler_factory: HandlerFactory | None = None,
) -> SessionRuntime:
    """Assemble the session runtime from resolved settings.

    The handler and the session logger are built before any stdlib logger is
    touched, so a raising factory leaves the logging tree unchanged.
    """

    handler: logging.Handler | None = None
    if settings.install_console:
        handler = (handler_factory or create_console_handler)(settings)

    try:
        session_log = CategorySessionLogger(factory)
    except Exception:
        if handler is not None:
            handler.close()
        raise
    if settings.display_data is not None:
        session_log.set_should_display_data(settings.display_data)

    previous_levels = _apply_levels(settings)
    if handler is not None:
        logging.getLogger(NAMESPACE).addHandler(handler)

    logger.debug(
        "session runtime ready",
        extra={"console_level": settings.console_level.name, "categories": sorted(settings.category_levels)},
    )
    return SessionRuntime(
        session_log=session_log,
        settings=settings,
        handler=handler,
        previous_levels=previous_levels,
    )


def teardown_runtime(runtime: SessionRuntime) -> None:
    """Detach the console handler and restore the recorded logger levels."""

    if runtime.handler is not None:
        logging.getLogger(NAMESPACE).removeHandler(runtime.handler)
        runtime.handler.close()
    for name, level in runtime.previous_levels.items():
        logging.getLogger(name).setLevel(level)
    logger.debug("session runtime torn down")


def _apply_levels(settings: RuntimeSettings) -> dict[str, int]:
    """Set stdlib thresholds and return the levels they replaced."""

    targets = {NAMESPACE: settings.console_level}
    for category, level in settings.category_levels.items():
        targets[logger_name(category)] = level

    previous: dict[str, int] = {}
    for name, level in targets.items():
        stdlib_logger = logging.getLogger(name)
        previous[name] = stdlib_logger.level
        stdlib_logger.setLevel(level.to_python_level())
    return previous


__all__ = ["build_runtime", "create_console_handler", "teardown_runtime"]
