import logging
from decimal import Decimal

import pytest
from PySide6.QtCore import QCoreApplication

from deskcalc.controller.calculator_controller import CalculatorController
from deskcalc.model.events import Digit
from deskcalc.model.state import CalculatorState, ERROR_MARKER


@pytest.fixture(scope="module")
def qcore_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def controller(qcore_app):
    return CalculatorController()


@pytest.fixture
def displays(controller):
    received = []
    controller.display_changed.connect(lambda text, is_error: received.append((text, is_error)))
    return received


@pytest.fixture
def memory_flags(controller):
    received = []
    controller.memory_changed.connect(received.append)
    return received


def test_press_updates_display(controller, displays):
    for label in ("1", "2", "+", "3", "="):
        controller.press(label)
    assert controller.display == "15"
    assert displays == [("1", False), ("12", False), ("3", False), ("15", False)]


def test_unchanged_display_emits_nothing(controller, displays):
    controller.press("0")
    controller.press(".")
    controller.press(".")
    assert displays == [("0.", False)]


def test_error_signal(controller, displays):
    for label in ("7", "/", "0", "="):
        controller.press(label)
    assert displays[-1] == (ERROR_MARKER, True)
    controller.press("4")
    assert displays[-1] == ("4", False)


def test_memory_indicator(controller, memory_flags):
    controller.press("5")
    controller.press("M+")
    controller.press("M+")
    controller.press("MC")
    assert memory_flags == [True, False]


def test_handle_event(controller, displays):
    controller.handle(Digit(9))
    assert displays == [("9", False)]


def test_unknown_label(controller, displays, caplog):
    with caplog.at_level(logging.WARNING):
        controller.press("sin")
    assert displays == []
    assert "sin" in caplog.text


def test_reset(controller, displays, memory_flags):
    controller.press("8")
    controller.reset(CalculatorState(display="42", memory=Decimal(1)))
    assert controller.display == "42"
    assert displays[-1] == ("42", False)
    assert memory_flags[-1] is True
