"""
Calculator Controller
=====================
Qt-facing owner of the running calculator.

Why is this file needed?
------------------------
1. Routing: buttons and keys hand their events (or captions) to the
   controller, which feeds them through the engine.
2. Signals: the view redraws on `display_changed` / `memory_changed` instead
   of polling the engine.

Classes:
    CalculatorController: QObject wrapping a `CalculatorEngine`.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from deskcalc.controller.keymap import event_for_label
from deskcalc.model.engine import CalculatorEngine
from deskcalc.model.events import Event
from deskcalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


class CalculatorController(QObject):
    """Dispatches input events and reports display changes through signals."""
    display_changed = Signal(str, bool)  # (text, is_error)
    memory_changed = Signal(bool)        # memory register is non-zero

    def __init__(self, engine: Optional[CalculatorEngine] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.engine = engine or CalculatorEngine()

    @property
    def state(self) -> CalculatorState:
        return self.engine.state

    @property
    def display(self) -> str:
        return self.engine.display

    def handle(self, event: Event) -> None:
        before = self.engine.state
        logger.debug(f"Dispatching {event}")
        self.engine.dispatch(event)
        after = self.engine.state

        if (after.display, after.error) != (before.display, before.error):
            self.display_changed.emit(after.display, after.error)
        if after.has_memory != before.has_memory:
            self.memory_changed.emit(after.has_memory)

    def press(self, label: str) -> None:
        """Handle a click on the button captioned `label`."""
        event = event_for_label(label)
        if event is None:
            logger.warning(f"No action bound to button '{label}'.")
            return
        self.handle(event)

    def reset(self, state: Optional[CalculatorState] = None) -> None:
        """Replace the whole state (e.g. restoring a snapshot) and refresh listeners."""
        self.engine.state = state or CalculatorState()
        logger.info("Calculator state has been reset.")
        self.display_changed.emit(self.engine.display, self.engine.error)
        self.memory_changed.emit(self.engine.state.has_memory)
