"""
Keypad & Keyboard Mapping
=========================
Translates what the user touches into engine events.

Why is this file needed?
------------------------
The engine must never branch on button captions. This module is the only
place that knows the captions ("M+", "1/x", ...) and the keyboard shortcuts,
and it turns each of them into an `Event` once.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from PySide6.QtCore import Qt

from deskcalc.model.events import (
    AllClear, Backspace, BinaryOperator, ClearEntry, DecimalPoint, Digit, Equals, Event,
    Memory, MemoryAction, Operator, Unary, UnaryOperator,
)

# Main grid, row by row (6 x 4)
BUTTON_ROWS: List[List[str]] = [
    ["MC", "MR", "M+", "M-"],
    ["AC", "C", "←", "/"],
    ["7", "8", "9", "*"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "+"],
    ["+/-", "0", ".", "="],
]

# Extra row below the grid
ADVANCED_BUTTONS: List[str] = ["sqrt", "%", "1/x", "x^y", "mod"]

LABEL_EVENTS: Dict[str, Event] = {
    "MC": Memory(MemoryAction.CLEAR),
    "MR": Memory(MemoryAction.RECALL),
    "M+": Memory(MemoryAction.ADD),
    "M-": Memory(MemoryAction.SUBTRACT),
    "AC": AllClear(),
    "C": ClearEntry(),
    "←": Backspace(),
    "+": Operator(BinaryOperator.ADD),
    "-": Operator(BinaryOperator.SUBTRACT),
    "*": Operator(BinaryOperator.MULTIPLY),
    "/": Operator(BinaryOperator.DIVIDE),
    "x^y": Operator(BinaryOperator.POWER),
    "mod": Operator(BinaryOperator.MODULUS),
    "=": Equals(),
    ".": DecimalPoint(),
    "sqrt": Unary(UnaryOperator.SQRT),
    "%": Unary(UnaryOperator.PERCENT),
    "1/x": Unary(UnaryOperator.RECIPROCAL),
    "+/-": Unary(UnaryOperator.NEGATE),
}
LABEL_EVENTS.update({str(d): Digit(d) for d in range(10)})

# Printable characters typed on the keyboard
TEXT_EVENTS: Dict[str, Event] = {
    ".": DecimalPoint(),
    ",": DecimalPoint(),
    "+": Operator(BinaryOperator.ADD),
    "-": Operator(BinaryOperator.SUBTRACT),
    "*": Operator(BinaryOperator.MULTIPLY),
    "/": Operator(BinaryOperator.DIVIDE),
    "^": Operator(BinaryOperator.POWER),
    "%": Unary(UnaryOperator.PERCENT),
    "=": Equals(),
}
TEXT_EVENTS.update({str(d): Digit(d) for d in range(10)})

# Non-printable keys
KEY_EVENTS: Dict[int, Event] = {
    int(Qt.Key.Key_Return): Equals(),
    int(Qt.Key.Key_Enter): Equals(),
    int(Qt.Key.Key_Backspace): Backspace(),
    int(Qt.Key.Key_Escape): AllClear(),
    int(Qt.Key.Key_Delete): ClearEntry(),
}


def event_for_label(label: str) -> Optional[Event]:
    """Event for a button caption, or None if the caption is unknown."""
    return LABEL_EVENTS.get(label)


def event_for_key(text: str, key: int) -> Optional[Event]:
    """
    Event for a key press.

    Args:
        text: The character the key produced (QKeyEvent.text()), may be empty.
        key: The Qt key code (QKeyEvent.key()).
    """
    event = KEY_EVENTS.get(int(key))
    if event is not None:
        return event
    return TEXT_EVENTS.get(text)
