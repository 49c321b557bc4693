from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_log_session.application.ports.backend import BackendLogger, BackendLoggerFactory
from lib_log_session.application.session_log import HIDDEN_PARAMETER, SessionLog
from lib_log_session.domain.entry import SessionLogEntry
from lib_log_session.domain.levels import SessionLevel

TIMESTAMP = datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)


class _FakeSessionLog(SessionLog):
    def __init__(self) -> None:
        super().__init__()
        self.entries: list[SessionLogEntry] = []

    def log(self, entry: SessionLogEntry) -> None:
        self.entries.append(entry)

    def should_log(self, level: int, category: str | None = None) -> bool:
        return True

    def should_display_data(self) -> bool:
        return bool(self.display_data)


def _entry(**changes) -> SessionLogEntry:
    base = SessionLogEntry(
        level=SessionLevel.FINE,
        message="SELECT * FROM EMP WHERE ID = {0}",
        category="sql",
        parameters=(7,),
        timestamp=TIMESTAMP,
        thread="worker-1",
        session="ServerSession(42)",
        connection="1234",
    )
    return base.replace(**changes)


def test_session_log_cannot_be_instantiated_directly() -> None:
    with pytest.raises(TypeError):
        SessionLog()  # type: ignore[abstract]


def test_supplement_detail_includes_all_parts_in_order() -> None:
    detail = _FakeSessionLog().get_supplement_detail_string(_entry())
    assert detail == (
        "[EL Fine]: sql: 2025-09-23T12:00:00+00:00--ServerSession(42)--Connection(1234)--Thread(worker-1)--"
    )


def test_supplement_detail_respects_print_toggles() -> None:
    session_log = _FakeSessionLog()
    session_log.print_date = False
    session_log.print_session = False
    session_log.print_connection = False
    session_log.print_thread = False
    assert session_log.get_supplement_detail_string(_entry()) == "[EL Fine]: sql: "


def test_supplement_detail_skips_missing_parts() -> None:
    session_log = _FakeSessionLog()
    session_log.print_date = False
    entry = _entry(category=None, thread=None, session=None, connection=None)
    assert session_log.get_supplement_detail_string(entry) == "[EL Fine]: "


def test_supplement_detail_labels_off_scale_levels() -> None:
    session_log = _FakeSessionLog()
    session_log.print_date = False
    assert session_log.get_supplement_detail_string(_entry(level=99, category=None, thread=None, session=None, connection=None)) == "[EL Level 99]: "


def test_format_message_hides_sql_parameters_by_default() -> None:
    message = _FakeSessionLog().format_message(_entry())
    assert message == f"SELECT * FROM EMP WHERE ID = {HIDDEN_PARAMETER}"


def test_format_message_shows_sql_parameters_when_allowed() -> None:
    session_log = _FakeSessionLog()
    session_log.set_should_display_data(True)
    assert session_log.format_message(_entry()) == "SELECT * FROM EMP WHERE ID = 7"


def test_format_message_shows_parameters_outside_sql() -> None:
    entry = _entry(category="cache", message="evicted {0} entries from {1}", parameters=(3, "Employee"))
    assert _FakeSessionLog().format_message(entry) == "evicted 3 entries from Employee"


@pytest.mark.parametrize(
    "message",
    [
        "needs {1}",
        "keyed {name}",
        "bad spec {0:q}",
        "value {0.missing}",
        "item {0[1]}",
    ],
)
def test_format_message_falls_back_when_placeholders_do_not_apply(message: str) -> None:
    entry = _entry(category="cache", message=message, parameters=(1,))
    assert _FakeSessionLog().format_message(entry) == message


def test_format_message_without_parameters_keeps_braces() -> None:
    entry = _entry(category="query", message="literal {braces}", parameters=())
    assert _FakeSessionLog().format_message(entry) == "literal {braces}"


def test_format_message_appends_exception_summary() -> None:
    entry = _entry(category="transaction", message="rollback", parameters=(), exception=ValueError("boom"))
    assert _FakeSessionLog().format_message(entry) == "rollback\nValueError: boom"


def test_format_message_appends_traceback_when_requested() -> None:
    try:
        raise KeyError("missing")
    except KeyError as exc:
        captured = exc
    session_log = _FakeSessionLog()
    session_log.print_exception_stack = True

    message = session_log.format_message(_entry(category="transaction", message="rollback", parameters=(), exception=captured))

    assert message.startswith("rollback\nTraceback (most recent call last):")
    assert message.endswith("KeyError: 'missing'")


def test_display_data_is_tri_state() -> None:
    session_log = _FakeSessionLog()
    assert session_log.display_data is None
    session_log.set_should_display_data(False)
    assert session_log.display_data is False
    session_log.set_should_display_data(None)
    assert session_log.display_data is None


def test_backend_ports_are_runtime_checkable(recording_factory) -> None:
    handle = recording_factory.get_logger("x")
    assert isinstance(handle, BackendLogger)
    assert isinstance(recording_factory, BackendLoggerFactory)
