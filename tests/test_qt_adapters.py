"""
Tests for the QTimer scheduler and Qt keyboard handling.
"""

import pytest

QtCore = pytest.importorskip("PySide6.QtCore")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("PySide6.QtMultimedia")

from PySide6.QtCore import QEvent, Qt  # noqa: E402
from PySide6.QtGui import QKeyEvent  # noqa: E402
from PySide6.QtTest import QTest  # noqa: E402

from conftest import make_question  # noqa: E402
from trivia_app.core.keyboard_map import KEY_ARROW_LEFT, KEY_ARROW_RIGHT, KEY_ENTER  # noqa: E402
from trivia_app.core.models import SessionConfig  # noqa: E402
from trivia_app.core.services.session_engine import SessionEngine  # noqa: E402
from trivia_app.ui.keyboard_adapter import KeyboardAdapter, key_name_for  # noqa: E402
from trivia_app.ui.qt_scheduler import QtScheduler  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def wait_until(condition, timeout_ms=2000):
    waited = 0
    while not condition() and waited < timeout_ms:
        QTest.qWait(10)
        waited += 10
    return condition()


def test_call_later_fires_once(qapp):
    scheduler = QtScheduler()
    calls = []

    handle = scheduler.call_later(20, lambda: calls.append("fired"))
    assert handle.is_active()

    assert wait_until(lambda: calls)
    QTest.qWait(60)
    assert calls == ["fired"]
    assert handle.is_active() is False
    assert scheduler.active_count() == 0


def test_cancelled_timer_never_fires(qapp):
    scheduler = QtScheduler()
    calls = []

    handle = scheduler.call_later(20, lambda: calls.append("fired"))
    handle.cancel()
    QTest.qWait(80)

    assert calls == []
    assert scheduler.active_count() == 0


def test_call_every_repeats_until_cancelled(qapp):
    scheduler = QtScheduler()
    calls = []

    handle = scheduler.call_every(10, lambda: calls.append(len(calls)))
    assert wait_until(lambda: len(calls) >= 3)
    handle.cancel()
    count = len(calls)
    QTest.qWait(60)

    assert len(calls) == count


def test_cancel_all(qapp):
    scheduler = QtScheduler()
    scheduler.call_every(10, lambda: None)
    scheduler.call_later(10, lambda: None)

    scheduler.cancel_all()
    assert scheduler.active_count() == 0


def test_engine_runs_on_qt_event_loop(qapp):
    engine = SessionEngine(QtScheduler(), tick_interval_ms=5, advance_delay_ms=5)
    engine.initialize(
        [make_question("Q1?", "A1"), make_question("Q2?", "A2")],
        SessionConfig(question_time_seconds=2),
    )

    assert wait_until(engine.is_completed)
    assert [r.selected_answer for r in engine.get_answered()] == ["No answer", "No answer"]


@pytest.mark.parametrize(
    "key,text,expected",
    [
        (Qt.Key_Right, "", KEY_ARROW_RIGHT),
        (Qt.Key_Left, "", KEY_ARROW_LEFT),
        (Qt.Key_Return, "\r", KEY_ENTER),
        (Qt.Key_Enter, "\r", KEY_ENTER),
        (Qt.Key_3, "3", "3"),
        (Qt.Key_A, "a", None),
        (Qt.Key_Up, "", None),
    ],
)
def test_key_name_for(key, text, expected):
    assert key_name_for(key, text) == expected


@pytest.fixture
def quiz_window(qapp):
    window = QtWidgets.QWidget()
    window.show()
    yield window
    window.close()


@pytest.fixture
def adapter(qapp, engine):
    keyboard = KeyboardAdapter(engine)
    keyboard.attach()
    yield keyboard
    keyboard.detach()


def test_attach_and_detach_are_idempotent(qapp, engine):
    keyboard = KeyboardAdapter(engine)
    assert keyboard.is_attached() is False

    keyboard.attach()
    keyboard.attach()
    assert keyboard.is_attached() is True

    keyboard.detach()
    keyboard.detach()
    assert keyboard.is_attached() is False


def test_digit_key_answers_current_question(adapter, engine, questions, config, quiz_window):
    engine.initialize(questions, config)
    expected = engine.get_answer_set()[0]

    QTest.keyClick(quiz_window, Qt.Key_1)

    assert [r.selected_answer for r in engine.get_answered()] == [expected]


def test_unbound_key_reaches_widget(adapter, engine, questions, config):
    engine.initialize(questions, config)
    event = QKeyEvent(QEvent.KeyPress, Qt.Key_A, Qt.NoModifier, "a")

    assert adapter.eventFilter(None, event) is False
    assert engine.get_answered() == []


def test_detached_adapter_ignores_keys(adapter, engine, questions, config, quiz_window):
    engine.initialize(questions, config)
    adapter.detach()

    QTest.keyClick(quiz_window, Qt.Key_1)

    assert engine.get_answered() == []


def test_modal_dialog_keeps_its_keys(adapter, engine, questions, config, quiz_window):
    engine.initialize(questions, config)
    box = QtWidgets.QMessageBox(quiz_window)
    box.setWindowModality(Qt.ApplicationModal)
    box.show()
    try:
        assert QtWidgets.QApplication.activeModalWidget() is box

        QTest.keyClick(box, Qt.Key_1)
        enter = QKeyEvent(QEvent.KeyPress, Qt.Key_Return, Qt.NoModifier, "\r")

        assert engine.get_answered() == []
        assert adapter.eventFilter(box, enter) is False
    finally:
        box.hide()
