"""Category-aware session logger forwarding entries to the backend.

Purpose
-------
Translate session log entries into backend calls: pick the backend logger
registered for the entry's category, map the host severity onto the backend
scale, and write the assembled message at that level.

Contents
--------
* :class:`CategorySessionLogger` – the adapter implementing :class:`SessionLog`.

System Role
-----------
The piece the persistence framework calls for every log record. Backend
loggers are named ``org.eclipse.persistence.logging.<category>`` so operators
configure verbosity per category with ordinary backend configuration.

Alignment Notes
---------------
Level mapping (see :data:`lib_log_session.domain.levels.LEVEL_TRANSLATION`):

* ``ALL``, ``FINEST``, ``FINER`` -> ``TRACE``
* ``FINE``, ``CONFIG`` -> ``DEBUG``
* ``INFO`` -> ``INFO``
* ``WARNING`` -> ``WARN``
* ``SEVERE`` -> ``ERROR``
* anything else -> ``OFF``
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from lib_log_session.application.ports.backend import BackendLogger, BackendLoggerFactory
from lib_log_session.application.session_log import SessionLog
from lib_log_session.domain.categories import DEFAULT_CATEGORY, DEFAULT_NAMESPACE, LOGGER_CATEGORIES, logger_name
from lib_log_session.domain.entry import SessionLogEntry
from lib_log_session.domain.levels import BackendLevel, translate

from .stdlib import StdlibLoggerFactory


class CategorySessionLogger(SessionLog):
    """Session logger keeping one backend logger per category.

    Parameters
    ----------
    factory:
        Source of backend logger handles; defaults to the stdlib factory.
    categories:
        Known category names; defaults to :data:`LOGGER_CATEGORIES`.

    Raises
    ------
    Exception
        Whatever ``factory.get_logger`` raises propagates unchanged.

    Examples
    --------
    >>> from lib_log_session.domain.levels import SessionLevel
    >>> session_log = CategorySessionLogger()
    >>> session_log.get_logger("sql").name
    'org.eclipse.persistence.logging.sql'
    >>> session_log.get_logger("no-such-category").name
    'org.eclipse.persistence.logging.default'
    >>> session_log.should_log(42)
    True
    """

    def __init__(
        self,
        factory: BackendLoggerFactory | None = None,
        *,
        categories: Iterable[str] | None = None,
    ) -> None:
        super().__init__()
        self._factory = factory if factory is not None else StdlibLoggerFactory()
        known = tuple(categories) if categories is not None else LOGGER_CATEGORIES
        self._category_loggers: Mapping[str, BackendLogger] = self._create_category_loggers(known)

    def _create_category_loggers(self, categories: tuple[str, ...]) -> Mapping[str, BackendLogger]:
        """Acquire every category logger eagerly and freeze the registry."""

        loggers: dict[str, BackendLogger] = {}
        for category in categories:
            loggers[category] = self._factory.get_logger(logger_name(category))
        loggers[DEFAULT_CATEGORY] = self._factory.get_logger(DEFAULT_NAMESPACE)
        return MappingProxyType(loggers)

    @property
    def category_loggers(self) -> Mapping[str, BackendLogger]:
        """Read-only view of the category registry, default entry included."""

        return self._category_loggers

    def get_logger(self, category: str | None) -> BackendLogger:
        """Return the backend logger for ``category``.

        ``None``, the empty string, and unknown names resolve to the default
        logger.
        """

        if not category or category not in self._category_loggers:
            category = DEFAULT_CATEGORY
        return self._category_loggers[category]

    def should_log(self, level: int, category: str | None = DEFAULT_CATEGORY) -> bool:
        """Return whether ``level`` is enabled on the logger for ``category``.

        Levels without a backend counterpart return ``True`` so unknown
        severities are never suppressed by the gate.
        """

        logger = self.get_logger(category)
        backend_level = translate(level)
        if not backend_level.dispatchable:
            return True
        return getattr(logger, backend_level.enabled_query)()

    def log(self, entry: SessionLogEntry) -> None:
        """Write ``entry`` to its category logger at the translated level.

        Nothing is rendered when the gate rejects the entry. Entries whose
        level translates to ``OFF`` pass the gate but are not written.
        """

        if not self.should_log(entry.level, entry.category):
            return

        logger = self.get_logger(entry.category)
        backend_level = translate(entry.level)
        if not backend_level.dispatchable:
            return

        message = self.get_supplement_detail_string(entry) + self.format_message(entry)

        if backend_level is BackendLevel.TRACE:
            logger.trace(message)
        elif backend_level is BackendLevel.DEBUG:
            logger.debug(message)
        elif backend_level is BackendLevel.INFO:
            logger.info(message)
        elif backend_level is BackendLevel.WARN:
            logger.warn(message)
        elif backend_level is BackendLevel.ERROR:
            logger.error(message)

    def should_display_data(self) -> bool:
        """Return the explicitly set display-data flag, ``False`` when unset."""

        if self._display_data is not None:
            return self._display_data
        return False


__all__ = ["CategorySessionLogger"]
