"""
Tests for the Qt calculator window (offscreen platform).
"""

import pytest

from vectorcalc.controller.calculator import FORMAT_ERROR_MESSAGE, Operation

pytestmark = pytest.mark.gui


@pytest.fixture
def window(qapp):
    from vectorcalc.view.main_window import MainWindow

    win = MainWindow()
    yield win
    win.close()
    win.deleteLater()


def test_one_button_per_operation(window):
    assert set(window.buttons) == set(Operation)


def test_button_click_shows_result(window):
    window.a_edit.setText("(1; 2)")
    window.b_edit.setText("(3; 4; 5)")
    window.buttons[Operation.SUM].click()
    assert window.result_label.text() == "A + B = (4.0; 6.0; 5.0)"
    assert window.result_label.styleSheet() == ""


def test_error_is_shown_in_red(window):
    window.a_edit.setText("(1; a)")
    window.b_edit.setText("(1)")
    result = window.calculate(Operation.DOT)
    assert result.is_error
    assert window.result_label.text() == FORMAT_ERROR_MESSAGE
    assert "red" in window.result_label.styleSheet()


def test_result_signal(window):
    received = []
    window.result_changed.connect(received.append)
    window.a_edit.setText("(3; 4)")
    window.calculate(Operation.LENGTH_A)
    assert [r.text for r in received] == ["|A| = 5.0"]


def test_clear(window):
    window.a_edit.setText("(1)")
    window.calculate(Operation.LENGTH_A)
    window.clear()
    assert window.a_edit.text() == ""
    assert window.result_label.text() == ""
    assert window.last_result is None
