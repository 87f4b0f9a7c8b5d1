"""
Calculator Engine
=================
The state machine behind the keypad.

Why is this file needed?
------------------------
1. Transitions: `reduce(state, event)` is a pure function mapping the current
   `CalculatorState` and one input event to the next state. It never touches
   Qt and never raises for arithmetic failures.
2. Convenience: `CalculatorEngine` keeps the current state and offers one
   method per key, returning the new display text.

Operator chaining is strictly left to right: 5 + 3 * 2 = gives 16.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Dict, Optional, Type

from deskcalc.model.arithmetic import (
    add, evaluate, format_decimal, negate, percent, reciprocal, square_root, subtract, ZERO,
)
from deskcalc.model.errors import CalculatorError
from deskcalc.model.events import (
    AllClear, Backspace, BinaryOperator, ClearEntry, DecimalPoint, Digit, Equals, Event,
    Memory, MemoryAction, Operator, Unary, UnaryOperator,
)
from deskcalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Input accumulation
# ------------------------------------------------------------------------------
def _digit(state: CalculatorState, event: Digit) -> CalculatorState:
    digit = str(event.value)
    if state.start_new_number or state.display == "0":
        return state.evolve(display=digit, start_new_number=False, operand_entered=True)
    return state.evolve(display=state.display + digit, operand_entered=True)


def _decimal_point(state: CalculatorState, event: DecimalPoint) -> CalculatorState:
    if state.start_new_number:
        return state.evolve(display="0.", start_new_number=False, operand_entered=True)
    if "." in state.display:
        return state
    return state.evolve(display=state.display + ".")


def _clear_entry(state: CalculatorState, event: ClearEntry) -> CalculatorState:
    return state.evolve(display="0", start_new_number=True, operand_entered=False)


def _all_clear(state: CalculatorState, event: AllClear) -> CalculatorState:
    return state.evolve(display="0", accumulator=ZERO, pending=None, start_new_number=True,
                        operand_entered=False)


def _backspace(state: CalculatorState, event: Backspace) -> CalculatorState:
    if state.start_new_number:
        return state
    text = state.display[:-1]
    if text in ("", "-"):
        return state.evolve(display="0", start_new_number=True, operand_entered=False)
    return state.evolve(display=text)


# ------------------------------------------------------------------------------
# Operators
# ------------------------------------------------------------------------------
def _failed(state: CalculatorState, error: CalculatorError) -> CalculatorState:
    logger.info(f"Arithmetic error: {error}")
    return state.with_error()


def _operator(state: CalculatorState, event: Operator) -> CalculatorState:
    operand = state.value
    if state.pending is None:
        return state.evolve(accumulator=operand, pending=event.op, start_new_number=True,
                            operand_entered=False)

    # Operator pressed again without a new operand: just swap the operator.
    if not state.operand_entered:
        return state.evolve(pending=event.op)

    try:
        result = evaluate(state.accumulator, operand, state.pending)
    except CalculatorError as e:
        return _failed(state.evolve(pending=None), e)
    return state.evolve(
        accumulator=result,
        display=format_decimal(result),
        pending=event.op,
        start_new_number=True,
        operand_entered=False,
    )


def _equals(state: CalculatorState, event: Equals) -> CalculatorState:
    if state.pending is None:
        return state
    try:
        result = evaluate(state.accumulator, state.value, state.pending)
    except CalculatorError as e:
        return _failed(state.evolve(pending=None), e)
    return state.evolve(
        accumulator=result,
        display=format_decimal(result),
        pending=None,
        start_new_number=True,
        operand_entered=False,
    )


def _unary(state: CalculatorState, event: Unary) -> CalculatorState:
    operand = state.value
    try:
        if event.op == UnaryOperator.SQRT:
            result = square_root(operand)
        elif event.op == UnaryOperator.RECIPROCAL:
            result = reciprocal(operand)
        elif event.op == UnaryOperator.NEGATE:
            result = negate(operand)
        elif event.op == UnaryOperator.PERCENT:
            base: Optional[Decimal] = state.accumulator if state.pending is not None else None
            result = percent(operand, base)
        else:
            raise ValueError(f"Unknown unary operator: {event.op!r}")
    except CalculatorError as e:
        # Accumulator and pending operator survive a failed unary operation.
        return _failed(state, e)
    return state.evolve(display=format_decimal(result), start_new_number=True, operand_entered=True)


# ------------------------------------------------------------------------------
# Memory register
# ------------------------------------------------------------------------------
def _memory(state: CalculatorState, event: Memory) -> CalculatorState:
    if event.kind == MemoryAction.CLEAR:
        return state.evolve(memory=ZERO)
    if event.kind == MemoryAction.RECALL:
        return state.evolve(display=format_decimal(state.memory), start_new_number=True,
                            operand_entered=True)
    if event.kind == MemoryAction.ADD:
        return state.evolve(memory=add(state.memory, state.value))
    if event.kind == MemoryAction.SUBTRACT:
        return state.evolve(memory=subtract(state.memory, state.value))
    raise ValueError(f"Unknown memory action: {event.kind!r}")


_HANDLERS: Dict[Type, Callable[[CalculatorState, Event], CalculatorState]] = {
    Digit: _digit,
    DecimalPoint: _decimal_point,
    ClearEntry: _clear_entry,
    AllClear: _all_clear,
    Backspace: _backspace,
    Operator: _operator,
    Equals: _equals,
    Unary: _unary,
    Memory: _memory,
}


def reduce(state: CalculatorState, event: Event) -> CalculatorState:
    """Return the state that follows `state` after `event`."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported calculator event: {event!r}")
    return handler(state, event)


class CalculatorEngine:
    """
    Stateful wrapper around `reduce`.

    Not thread-safe: call it from the GUI thread only.
    """

    def __init__(self, state: Optional[CalculatorState] = None) -> None:
        self.state: CalculatorState = state or CalculatorState()

    @property
    def display(self) -> str:
        return self.state.display

    @property
    def error(self) -> bool:
        return self.state.error

    def dispatch(self, event: Event) -> str:
        self.state = reduce(self.state, event)
        return self.state.display

    def digit(self, d: int) -> str:
        return self.dispatch(Digit(d))

    def decimal_point(self) -> str:
        return self.dispatch(DecimalPoint())

    def clear_entry(self) -> str:
        return self.dispatch(ClearEntry())

    def all_clear(self) -> str:
        return self.dispatch(AllClear())

    def backspace(self) -> str:
        return self.dispatch(Backspace())

    def apply_binary_operator(self, op: BinaryOperator) -> str:
        return self.dispatch(Operator(BinaryOperator(op)))

    def equals(self) -> str:
        return self.dispatch(Equals())

    def unary(self, op: UnaryOperator) -> str:
        return self.dispatch(Unary(UnaryOperator(op)))

    def memory_clear(self) -> str:
        return self.dispatch(Memory(MemoryAction.CLEAR))

    def memory_recall(self) -> str:
        return self.dispatch(Memory(MemoryAction.RECALL))

    def memory_add(self) -> str:
        return self.dispatch(Memory(MemoryAction.ADD))

    def memory_subtract(self) -> str:
        return self.dispatch(Memory(MemoryAction.SUBTRACT))
