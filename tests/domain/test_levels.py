from __future__ import annotations

import logging

import pytest

from lib_log_session.domain.levels import LEVEL_TRANSLATION, TRACE_LEVEL, BackendLevel, SessionLevel, translate


@pytest.mark.parametrize(
    "level, expected",
    [
        (SessionLevel.ALL, BackendLevel.TRACE),
        (SessionLevel.FINEST, BackendLevel.TRACE),
        (SessionLevel.FINER, BackendLevel.TRACE),
        (SessionLevel.FINE, BackendLevel.DEBUG),
        (SessionLevel.CONFIG, BackendLevel.DEBUG),
        (SessionLevel.INFO, BackendLevel.INFO),
        (SessionLevel.WARNING, BackendLevel.WARN),
        (SessionLevel.SEVERE, BackendLevel.ERROR),
    ],
)
def test_translate_follows_fixed_table(level: SessionLevel, expected: BackendLevel) -> None:
    assert translate(level) is expected
    assert translate(int(level)) is expected


@pytest.mark.parametrize("number", [SessionLevel.OFF, -1, 9, 42, 1000])
def test_translate_unmapped_values_yield_off(number: int) -> None:
    assert translate(number) is BackendLevel.OFF


def test_translation_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        LEVEL_TRANSLATION[SessionLevel.OFF] = BackendLevel.ERROR  # type: ignore[index]


def test_session_levels_are_ordered_from_most_verbose() -> None:
    ordered = sorted(SessionLevel)
    assert ordered[0] is SessionLevel.ALL
    assert ordered[-1] is SessionLevel.OFF
    assert SessionLevel.FINE < SessionLevel.INFO < SessionLevel.SEVERE


@pytest.mark.parametrize(
    "name, expected",
    [
        ("finest", SessionLevel.FINEST),
        (" Config ", SessionLevel.CONFIG),
        ("SEVERE", SessionLevel.SEVERE),
    ],
)
def test_session_level_from_name_is_case_insensitive(name: str, expected: SessionLevel) -> None:
    assert SessionLevel.from_name(name) is expected


def test_session_level_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown session level"):
        SessionLevel.from_name("verbose")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trace", BackendLevel.TRACE),
        ("Debug", BackendLevel.DEBUG),
        ("WARN", BackendLevel.WARN),
        ("warning", BackendLevel.WARN),
        ("error", BackendLevel.ERROR),
    ],
)
def test_backend_level_from_name(name: str, expected: BackendLevel) -> None:
    assert BackendLevel.from_name(name) is expected


def test_backend_level_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown backend level"):
        BackendLevel.from_name("critical")


@pytest.mark.parametrize(
    "level, python_level",
    [
        (BackendLevel.TRACE, TRACE_LEVEL),
        (BackendLevel.DEBUG, logging.DEBUG),
        (BackendLevel.INFO, logging.INFO),
        (BackendLevel.WARN, logging.WARNING),
        (BackendLevel.ERROR, logging.ERROR),
    ],
)
def test_backend_level_to_python_level(level: BackendLevel, python_level: int) -> None:
    assert level.to_python_level() == python_level


def test_off_is_not_dispatchable_and_sits_above_critical() -> None:
    assert not BackendLevel.OFF.dispatchable
    assert BackendLevel.OFF.to_python_level() > logging.CRITICAL
    assert all(level.dispatchable for level in BackendLevel if level is not BackendLevel.OFF)


def test_session_level_label() -> None:
    assert SessionLevel.WARNING.label == "Warning"
