"""Runtime façade that wires the session log adapter to the stdlib backend.

Purpose
-------
Expose a stable entry point (``init``, ``get_session_log``,
``inspect_runtime``, ``shutdown``) that host applications call once during
startup instead of assembling backend thresholds, handlers and the adapter by
hand.

Contents
--------
* ``init`` – composition root for the process-wide session log.
* ``get_session_log`` – accessor handed to the persistence framework.
* ``inspect_runtime`` – read-only snapshot of the active configuration.
* ``shutdown`` – detach handlers and restore logger levels.
* ``logdemo`` – emit one sample entry per session level.
* ``summary_info`` – metadata banner used by the CLI.

System Role
-----------
Outer shell of the package: the adapter itself stays usable without the
runtime, the runtime merely supplies sensible stdlib wiring.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from lib_log_session.adapters.session_logger import CategorySessionLogger
from lib_log_session.application.ports.backend import BackendLoggerFactory
from lib_log_session.domain.entry import SessionLogEntry
from lib_log_session.domain.levels import BackendLevel, SessionLevel, translate

from ._composition import HandlerFactory, build_runtime, teardown_runtime
from ._settings import RuntimeSettings, build_runtime_settings, coerce_level
from ._state import SessionRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active session runtime."""

    console_level: BackendLevel
    category_levels: Mapping[str, BackendLevel]
    display_data: bool
    console_installed: bool
    logger_names: tuple[str, ...]


__all__ = [
    "RuntimeSettings",
    "RuntimeSnapshot",
    "SessionRuntime",
    "build_runtime_settings",
    "coerce_level",
    "get_session_log",
    "init",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "shutdown",
    "summary_info",
]


def init(
    *,
    console_level: str | BackendLevel = BackendLevel.INFO,
    category_levels: Mapping[str, str | BackendLevel] | None = None,
    display_data: bool | None = None,
    install_console: bool = True,
    force_color: bool = False,
    no_color: bool = False,
    console_styles: Mapping[str, str] | None = None,
    factory: BackendLoggerFactory | None = None,
    handler_factory: HandlerFactory | None = None,
) -> CategorySessionLogger:
    """Compose the session runtime and return its session logger.

    Inputs
    ------
    console_level:
        Backend threshold applied to the ``org.eclipse.persistence.logging``
        namespace logger. Strings are coerced via :meth:`BackendLevel.from_name`.
    category_levels:
        Optional per-category thresholds, e.g. ``{"sql": "trace"}``.
    display_data:
        Initial value of the tri-state display-data flag; ``None`` leaves it
        unset.
    install_console, force_color, no_color, console_styles:
        Control the Rich console handler attached to the namespace logger.
    factory, handler_factory:
        Injection points for alternative backends and handlers.

    Side Effects
    ------------
    Raises :class:`RuntimeError` when a runtime is already active. Mutates the
    stdlib levels of the namespace and configured category loggers until
    :func:`shutdown` restores them.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_session.init() cannot be called twice without shutdown(); call lib_log_session.shutdown() first",
        )

    settings = build_runtime_settings(
        console_level=console_level,
        category_levels=category_levels,
        display_data=display_data,
        install_console=install_console,
        force_color=force_color,
        no_color=no_color,
        console_styles=console_styles,
    )
    runtime = build_runtime(settings, factory=factory, handler_factory=handler_factory)
    set_runtime(runtime)
    logger.debug("lib_log_session initialised at %s", settings.console_level.name)
    return runtime.session_log


def get_session_log() -> CategorySessionLogger:
    """Return the session logger of the active runtime.

    Raises :class:`RuntimeError` when :func:`init` has not been called.
    """

    return current_runtime().session_log


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    session_log = runtime.session_log
    return RuntimeSnapshot(
        console_level=runtime.settings.console_level,
        category_levels=MappingProxyType(dict(runtime.settings.category_levels)),
        display_data=session_log.should_display_data(),
        console_installed=runtime.handler is not None,
        logger_names=tuple(handle.name for handle in session_log.category_loggers.values()),
    )


def shutdown() -> None:
    """Detach the console handler, restore logger levels, and clear state."""

    runtime = current_runtime()
    teardown_runtime(runtime)
    clear_runtime()


_DEMO_MESSAGES: Mapping[SessionLevel, str] = {
    SessionLevel.ALL: "all-level diagnostic",
    SessionLevel.FINEST: "finest: binding parameter {0}",
    SessionLevel.FINER: "finer: entering method {0}",
    SessionLevel.FINE: "fine: SELECT ID, NAME FROM EMPLOYEE WHERE ID = {0}",
    SessionLevel.CONFIG: "config: connection pool size {0}",
    SessionLevel.INFO: "info: login successful for session {0}",
    SessionLevel.WARNING: "warning: cache miss ratio above {0}",
    SessionLevel.SEVERE: "severe: transaction {0} rolled back",
}


def logdemo(
    *,
    category: str | None = "sql",
    console_level: str | BackendLevel = BackendLevel.TRACE,
    display_data: bool | None = None,
    force_color: bool = False,
    no_color: bool = False,
    handler_factory: HandlerFactory | None = None,
) -> list[dict[str, Any]]:
    """Emit one sample entry per session level through a temporary runtime.

    Returns one dictionary per emitted entry describing the host level, the
    translated backend level, and whether the gate let it through.

    Raises
    ------
    RuntimeError
        If the runtime is already initialised when :func:`logdemo` is called.
    ValueError
        When ``console_level`` is unknown.
    """

    if is_initialised():
        raise RuntimeError("logdemo() requires lib_log_session to be uninitialised. Call shutdown() first.")

    session_log = init(
        console_level=console_level,
        display_data=display_data,
        force_color=force_color,
        no_color=no_color,
        handler_factory=handler_factory,
    )
    results: list[dict[str, Any]] = []
    try:
        for index, (level, message) in enumerate(_DEMO_MESSAGES.items(), start=1):
            entry = SessionLogEntry(
                level=level,
                message=message,
                category=category,
                parameters=(index,),
                thread="logdemo",
                session="DemoSession",
            )
            enabled = session_log.should_log(entry.level, entry.category)
            session_log.log(entry)
            results.append(
                {
                    "level": level.name,
                    "backend_level": translate(level).name,
                    "logger": session_log.get_logger(category).name,
                    "logged": enabled,
                }
            )
    finally:
        shutdown()
    return results


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "Info for lib_log_session" in summary_info()
    True
    """

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)

