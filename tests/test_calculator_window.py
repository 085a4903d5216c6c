"""Tests for the PyQt5 window (offscreen platform)."""

import os

import pytest

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
pytest.importorskip('PyQt5.QtWidgets')

from PyQt5.QtTest import QTest  # noqa: E402
from PyQt5.QtWidgets import QApplication  # noqa: E402

from calculator_window import (  # noqa: E402
    PRESS_FEEDBACK_MS,
    CalculatorWindow,
    parse_args,
)


@pytest.fixture(scope='module')
def app():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(app):
    w = CalculatorWindow()
    yield w
    w.close()


def test_initial_display(window):
    assert window.display.text() == '0'
    assert window.sub_display.text() == ''


def test_button_clicks(window):
    for label in ['5', '+', '3']:
        window.buttons[label].click()
    assert window.display.text() == '3'
    assert window.sub_display.text() == '5 +'
    window.buttons['='].click()
    assert window.display.text() == '8'
    assert window.sub_display.text() == ''


def test_obelus_button_divides(window):
    for label in ['9', '÷', '2', '=']:
        window.buttons[label].click()
    assert window.display.text() == '4.5'


def test_keyboard_keys(window):
    for key in ['6', '*', '7']:
        window.handle_key(key)
    assert window.sub_display.text() == '6 *'
    window.handle_key('Enter')
    assert window.display.text() == '42'
    window.handle_key('Escape')
    assert window.display.text() == '0'


def test_pressed_feedback_resets(window):
    window.handle_key('7')
    assert window.buttons['7'].isDown()
    assert not window.buttons['8'].isDown()
    QTest.qWait(PRESS_FEEDBACK_MS * 3)
    assert not window.buttons['7'].isDown()


def test_slash_key_highlights_obelus(window):
    window.handle_key('/')
    assert window.buttons['÷'].isDown()


def test_unknown_key_ignored(window):
    window.handle_key('5')
    window.handle_key('q')
    assert window.display.text() == '5'


def test_parse_args_defaults():
    args = parse_args([])
    assert args.log == 'calculator.log'
    assert not args.verbose
