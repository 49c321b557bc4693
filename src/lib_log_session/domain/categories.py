"""Known session log categories and backend logger naming.

Every category is published under a fixed namespace so backend configuration
can target ``org.eclipse.persistence.logging.sql`` and friends individually.
"""

from __future__ import annotations


NAMESPACE = "org.eclipse.persistence.logging"

DEFAULT_CATEGORY = "default"

DEFAULT_NAMESPACE = f"{NAMESPACE}.{DEFAULT_CATEGORY}"

LOGGER_CATEGORIES: tuple[str, ...] = (
    "sql",
    "transaction",
    "event",
    "connection",
    "query",
    "cache",
    "propagation",
    "sequencing",
    "ejb",
    "ejb_or_metadata",
    "weaver",
    "properties",
    "server",
)
"""Categories the persistence framework emits, excluding the fallback."""


def logger_name(category: str) -> str:
    """Return the backend logger name for ``category``.

    Examples
    --------
    >>> logger_name("sql")
    'org.eclipse.persistence.logging.sql'
    >>> logger_name(DEFAULT_CATEGORY) == DEFAULT_NAMESPACE
    True
    """

    return f"{NAMESPACE}.{category}"


__all__ = [
    "DEFAULT_CATEGORY",
    "DEFAULT_NAMESPACE",
    "LOGGER_CATEGORIES",
    "NAMESPACE",
    "logger_name",
]
