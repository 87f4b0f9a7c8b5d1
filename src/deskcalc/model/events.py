"""
Input Events
============
The event vocabulary the calculator engine understands.

The GUI translates button presses and key strokes into these objects (see
`deskcalc.controller.keymap`); the engine never looks at button labels.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union


class BinaryOperator(StrEnum):
    """Operations queued until the next operand is finished."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULUS = "mod"
    POWER = "^"


class UnaryOperator(StrEnum):
    """Operations applied immediately to the displayed value."""
    SQRT = "sqrt"
    RECIPROCAL = "1/x"
    NEGATE = "+/-"
    PERCENT = "%"


class MemoryAction(StrEnum):
    CLEAR = "MC"
    RECALL = "MR"
    ADD = "M+"
    SUBTRACT = "M-"


@dataclass(frozen=True)
class Digit:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or not 0 <= self.value <= 9:
            raise ValueError(f"Digit must be an integer 0-9, got {self.value!r}")


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class ClearEntry:
    pass


@dataclass(frozen=True)
class AllClear:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Operator:
    op: BinaryOperator


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class Unary:
    op: UnaryOperator


@dataclass(frozen=True)
class Memory:
    kind: MemoryAction


Event = Union[Digit, DecimalPoint, ClearEntry, AllClear, Backspace, Operator, Equals, Unary, Memory]
